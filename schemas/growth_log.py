from schemas.common import RequestBody
from datetime import datetime
from typing import Optional


class GrowthLogCreate(RequestBody):
    height: Optional[float] = None
    leaf_count: Optional[int] = None
    health_score: Optional[int] = None
    note: Optional[str] = None
    image_url: Optional[str] = None


class GrowthLogResponse(GrowthLogCreate):
    id: int
    plant_id: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
