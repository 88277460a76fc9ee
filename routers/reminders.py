from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from db.database import get_db
from models.reminder import Reminder
from schemas.reminder import ReminderCreate, ReminderResponse
from schemas.common import CreatedResponse
from typing import List

router = APIRouter(prefix="/api/reminders", tags=["Reminders"])


@router.get("", response_model=List[ReminderResponse])
def get_reminders(db: Session = Depends(get_db)):
    # 予定時刻が近い順
    return db.query(Reminder).order_by(Reminder.time.asc(), Reminder.id.asc()).all()


@router.post("", response_model=CreatedResponse)
def create_reminder(data: ReminderCreate, db: Session = Depends(get_db)):
    # status は DB の default（pending）に任せる
    reminder = Reminder(plant_id=data.plant_id, title=data.title, time=data.time)
    db.add(reminder)
    db.commit()
    return {"id": reminder.id}
