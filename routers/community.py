# routers/community.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from db.database import get_db

from models.community import CommunityPost, Comment, CommentReply
from schemas.community import (
    PostCreate,
    PostResponse,
    PostWithCommentsResponse,
    CommentCreate,
    ReplyCreate,
    CommentWithRepliesResponse,
    CommentsUpdatedEvent,
)
from services.broadcast import (
    BroadcastHub,
    get_hub,
    NEW_POST,
    POST_UPDATED,
    COMMENTS_UPDATED,
)
from services.community_service import list_posts_with_comments, comments_with_replies

from typing import List

router = APIRouter(prefix="/api", tags=["Community"])


# -------------------------
# posts
# -------------------------
@router.get("/community", response_model=List[PostWithCommentsResponse])
def get_posts(db: Session = Depends(get_db)):
    return list_posts_with_comments(db)


@router.post("/community", response_model=PostWithCommentsResponse)
def create_post(
    data: PostCreate,
    db: Session = Depends(get_db),
    hub: BroadcastHub = Depends(get_hub),
):
    post = CommunityPost(
        author=data.author,
        nickname=data.nickname,
        content=data.content,
        image_url=data.image_url,
    )
    db.add(post)
    db.commit()
    db.refresh(post)

    # 新規投稿なのでコメントは空
    new_post = PostWithCommentsResponse.model_validate(post)
    hub.publish(NEW_POST, new_post)
    return new_post


@router.post("/community/{post_id}/like", response_model=PostResponse)
def like_post(
    post_id: int,
    db: Session = Depends(get_db),
    hub: BroadcastHub = Depends(get_hub),
):
    # 加算は DB 側で行う（同時いいねでも取りこぼさない）
    db.query(CommunityPost).filter(CommunityPost.id == post_id).update(
        {CommunityPost.likes: CommunityPost.likes + 1}, synchronize_session=False
    )
    db.commit()

    # 存在しない投稿なら NoResultFound（他のDBエラーと同じ 500 になる）
    post = PostResponse.model_validate(
        db.query(CommunityPost).filter(CommunityPost.id == post_id).one()
    )
    hub.publish(POST_UPDATED, post)
    return post


# -------------------------
# comments / replies
# -------------------------
@router.post("/community/{post_id}/comment", response_model=List[CommentWithRepliesResponse])
def add_comment(
    post_id: int,
    data: CommentCreate,
    db: Session = Depends(get_db),
    hub: BroadcastHub = Depends(get_hub),
):
    db.add(Comment(post_id=post_id, author=data.author, content=data.content))
    db.commit()

    comments = comments_with_replies(db, post_id)
    hub.publish(COMMENTS_UPDATED, CommentsUpdatedEvent(postId=post_id, comments=comments))
    return comments


@router.post("/comments/{comment_id}/reply", response_model=List[CommentWithRepliesResponse])
def add_reply(
    comment_id: int,
    data: ReplyCreate,
    db: Session = Depends(get_db),
    hub: BroadcastHub = Depends(get_hub),
):
    db.add(CommentReply(comment_id=comment_id, author=data.author, content=data.content))
    db.commit()

    # 返信先コメントの投稿ID はクライアントから受け取った postId を使う
    comments = comments_with_replies(db, data.postId)
    hub.publish(
        COMMENTS_UPDATED, CommentsUpdatedEvent(postId=data.postId, comments=comments)
    )
    return comments
