from schemas.common import RequestBody
from datetime import datetime
from typing import Optional


class DiaryEntryCreate(RequestBody):
    plant_id: Optional[int] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    type: Optional[str] = None  # growth / care / disease


class DiaryEntryResponse(DiaryEntryCreate):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
