from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from db.database import get_db
from models.supply import Supply
from schemas.supply import SupplyResponse
from typing import List

router = APIRouter(prefix="/api/supplies", tags=["Supplies"])


@router.get("", response_model=List[SupplyResponse])
def get_supplies(db: Session = Depends(get_db)):
    # 登録APIはなし（scripts/seed_supplies.py で投入）
    return db.query(Supply).all()
