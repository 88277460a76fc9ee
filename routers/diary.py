from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from db.database import get_db
from models.diary import DiaryEntry
from schemas.diary import DiaryEntryCreate, DiaryEntryResponse
from schemas.common import CreatedResponse, SuccessResponse
from typing import List

router = APIRouter(prefix="/api/diary", tags=["Diary"])


@router.get("/{plant_id}", response_model=List[DiaryEntryResponse])
def get_diary(plant_id: int, db: Session = Depends(get_db)):
    return (
        db.query(DiaryEntry)
        .filter(DiaryEntry.plant_id == plant_id)
        .order_by(DiaryEntry.created_at.desc(), DiaryEntry.id.desc())
        .all()
    )


@router.post("", response_model=CreatedResponse)
def create_diary_entry(data: DiaryEntryCreate, db: Session = Depends(get_db)):
    entry = DiaryEntry(
        plant_id=data.plant_id,
        content=data.content,
        image_url=data.image_url,
        type=data.type,
    )
    db.add(entry)
    db.commit()
    return {"id": entry.id}


@router.delete("/{entry_id}", response_model=SuccessResponse)
def delete_diary_entry(entry_id: int, db: Session = Depends(get_db)):
    db.query(DiaryEntry).filter(DiaryEntry.id == entry_id).delete(synchronize_session=False)
    db.commit()
    return {"success": True}
