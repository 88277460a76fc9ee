from schemas.common import RequestBody
from datetime import datetime
from typing import Optional


class PlantCreate(RequestBody):
    name: Optional[str] = None
    species: Optional[str] = None
    age: Optional[str] = None
    planting_date: Optional[str] = None
    location: Optional[str] = None
    health_status: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None  # fruit / ornamental / indoor / outdoor


class PlantResponse(PlantCreate):
    id: int
    last_care: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
