from schemas.common import RequestBody
from datetime import datetime
from typing import Optional


class ExpenseCreate(RequestBody):
    plant_id: Optional[int] = None
    type: Optional[str] = None  # fertilizer / water / seed / other
    amount: Optional[float] = None
    description: Optional[str] = None


class ExpenseResponse(ExpenseCreate):
    id: int
    date: Optional[datetime] = None

    class Config:
        from_attributes = True
