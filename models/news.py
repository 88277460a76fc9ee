from sqlalchemy import Column, Integer, String, DateTime
from db.database import Base
from datetime import datetime

class SavedNews(Base):
    __tablename__ = "saved_news"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String)
    url = Column(String)
    snippet = Column(String)
    summary = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)


class NewsBookmark(Base):
    __tablename__ = "news_bookmarks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String)
    url = Column(String)
    snippet = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)
