# schemas/community.py
from pydantic import BaseModel
from schemas.common import RequestBody
from datetime import datetime
from typing import Optional, List


class PostCreate(RequestBody):
    author: Optional[str] = None
    nickname: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None


class CommentCreate(RequestBody):
    author: Optional[str] = None
    content: Optional[str] = None


class ReplyCreate(CommentCreate):
    # 返信後に再取得するコメント一覧の投稿ID（フロントから渡される）
    postId: Optional[int] = None


class ReplyResponse(BaseModel):
    id: int
    comment_id: Optional[int] = None
    author: Optional[str] = None
    content: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CommentResponse(BaseModel):
    id: int
    post_id: Optional[int] = None
    author: Optional[str] = None
    content: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CommentWithRepliesResponse(CommentResponse):
    replies: List[ReplyResponse] = []


class PostResponse(BaseModel):
    id: int
    author: Optional[str] = None
    nickname: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    likes: int = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PostWithCommentsResponse(PostResponse):
    """一覧・新規投稿用（コメントは返信なし）"""
    comments: List[CommentResponse] = []


class CommentsUpdatedEvent(BaseModel):
    """comments_updated イベントのペイロード"""
    postId: Optional[int]
    comments: List[CommentWithRepliesResponse]
