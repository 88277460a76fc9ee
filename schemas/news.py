# schemas/news.py
from schemas.common import RequestBody
from datetime import datetime
from typing import Optional


class NewsBookmarkCreate(RequestBody):
    title: Optional[str] = None
    url: Optional[str] = None
    snippet: Optional[str] = None


class NewsBookmarkResponse(NewsBookmarkCreate):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SavedNewsCreate(NewsBookmarkCreate):
    summary: Optional[str] = None


class SavedNewsResponse(SavedNewsCreate):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
