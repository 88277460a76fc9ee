from schemas.common import RequestBody
from typing import Optional


class ReminderCreate(RequestBody):
    plant_id: Optional[int] = None
    title: Optional[str] = None
    time: Optional[str] = None


class ReminderResponse(ReminderCreate):
    id: int
    status: Optional[str] = "pending"  # pending / completed

    class Config:
        from_attributes = True
