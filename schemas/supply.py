from pydantic import BaseModel
from typing import Optional


class SupplyResponse(BaseModel):
    id: int
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    usage_guide: Optional[str] = None
    side_effects: Optional[str] = None
    store_url: Optional[str] = None
    image_url: Optional[str] = None

    class Config:
        from_attributes = True
