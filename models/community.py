from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from db.database import Base
from datetime import datetime

class CommunityPost(Base):
    __tablename__ = "community_posts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    author = Column(String)
    nickname = Column(String)
    content = Column(String)
    image_url = Column(String)
    likes = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)


class Comment(Base):
    __tablename__ = "comments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("community_posts.id"))
    author = Column(String)
    content = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)


class CommentReply(Base):
    __tablename__ = "comment_replies"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    comment_id = Column(Integer, ForeignKey("comments.id"))
    author = Column(String)
    content = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)
