from typing import List, Optional

from sqlalchemy.orm import Session

from models.community import CommunityPost, Comment, CommentReply
from schemas.community import (
    CommentResponse,
    CommentWithRepliesResponse,
    PostWithCommentsResponse,
    ReplyResponse,
)


def _comments_for_post(db: Session, post_id: Optional[int]) -> List[Comment]:
    # postId なしの返信では何も返さない（IS NULL で拾わない）
    if post_id is None:
        return []
    return (
        db.query(Comment)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )


def list_posts_with_comments(db: Session) -> List[PostWithCommentsResponse]:
    """
    投稿一覧（新しい順）＋各投稿のコメント（古い順、返信なし）
    """
    posts = (
        db.query(CommunityPost)
        .order_by(CommunityPost.created_at.desc(), CommunityPost.id.desc())
        .all()
    )

    result = []
    for post in posts:
        item = PostWithCommentsResponse.model_validate(post)
        item.comments = [
            CommentResponse.model_validate(c) for c in _comments_for_post(db, post.id)
        ]
        result.append(item)
    return result


def comments_with_replies(
    db: Session, post_id: Optional[int]
) -> List[CommentWithRepliesResponse]:
    """
    投稿のコメント（古い順）＋各コメントの返信（古い順）
    """
    result = []
    for comment in _comments_for_post(db, post_id):
        replies = (
            db.query(CommentReply)
            .filter(CommentReply.comment_id == comment.id)
            .order_by(CommentReply.created_at.asc(), CommentReply.id.asc())
            .all()
        )
        item = CommentWithRepliesResponse.model_validate(comment)
        item.replies = [ReplyResponse.model_validate(r) for r in replies]
        result.append(item)
    return result
