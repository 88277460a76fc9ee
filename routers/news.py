# routers/news.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from db.database import get_db
from models.news import SavedNews, NewsBookmark
from schemas.news import (
    SavedNewsCreate,
    SavedNewsResponse,
    NewsBookmarkCreate,
    NewsBookmarkResponse,
)
from schemas.common import CreatedResponse
from typing import List

router = APIRouter(prefix="/api/news", tags=["News"])


# -------------------------
# saved (要約つき)
# -------------------------
@router.get("/saved", response_model=List[SavedNewsResponse])
def get_saved_news(db: Session = Depends(get_db)):
    return (
        db.query(SavedNews)
        .order_by(SavedNews.created_at.desc(), SavedNews.id.desc())
        .all()
    )


@router.post("/saved", response_model=CreatedResponse)
def save_news(data: SavedNewsCreate, db: Session = Depends(get_db)):
    news = SavedNews(
        title=data.title,
        url=data.url,
        snippet=data.snippet,
        summary=data.summary,
    )
    db.add(news)
    db.commit()
    return {"id": news.id}


# -------------------------
# bookmarks
# -------------------------
@router.get("/bookmarks", response_model=List[NewsBookmarkResponse])
def get_bookmarks(db: Session = Depends(get_db)):
    return (
        db.query(NewsBookmark)
        .order_by(NewsBookmark.created_at.desc(), NewsBookmark.id.desc())
        .all()
    )


@router.post("/bookmarks", response_model=CreatedResponse)
def create_bookmark(data: NewsBookmarkCreate, db: Session = Depends(get_db)):
    bookmark = NewsBookmark(title=data.title, url=data.url, snippet=data.snippet)
    db.add(bookmark)
    db.commit()
    return {"id": bookmark.id}
