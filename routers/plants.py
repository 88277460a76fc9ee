# routers/plants.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from db.database import get_db
from models.plant import Plant
from models.growth_log import GrowthLog
from models.diary import DiaryEntry
from schemas.plant import PlantCreate, PlantResponse
from schemas.growth_log import GrowthLogCreate, GrowthLogResponse
from schemas.common import CreatedResponse, SuccessResponse
from typing import List

router = APIRouter(
    prefix="/api/plants",
    tags=["Plants"],
)


@router.get("", response_model=List[PlantResponse])
def get_plants(db: Session = Depends(get_db)):
    return db.query(Plant).order_by(Plant.created_at.desc(), Plant.id.desc()).all()


@router.post("", response_model=CreatedResponse)
def create_plant(data: PlantCreate, db: Session = Depends(get_db)):
    plant = Plant(
        name=data.name,
        species=data.species,
        age=data.age,
        planting_date=data.planting_date,
        location=data.location,
        health_status=data.health_status,
        image_url=data.image_url,
        category=data.category,
    )
    db.add(plant)
    db.commit()
    return {"id": plant.id}


@router.delete("/{plant_id}", response_model=SuccessResponse)
def delete_plant(plant_id: int, db: Session = Depends(get_db)):
    """
    植物を削除する
    日記だけ一緒に消す（成長記録・支出・リマインダーは残る）
    """
    db.query(DiaryEntry).filter(DiaryEntry.plant_id == plant_id).delete(
        synchronize_session=False
    )
    db.query(Plant).filter(Plant.id == plant_id).delete(synchronize_session=False)
    db.commit()
    return {"success": True}


@router.get("/{plant_id}/growth", response_model=List[GrowthLogResponse])
def get_growth_logs(plant_id: int, db: Session = Depends(get_db)):
    return (
        db.query(GrowthLog)
        .filter(GrowthLog.plant_id == plant_id)
        .order_by(GrowthLog.created_at.asc(), GrowthLog.id.asc())
        .all()
    )


@router.post("/{plant_id}/growth", response_model=CreatedResponse)
def create_growth_log(plant_id: int, data: GrowthLogCreate, db: Session = Depends(get_db)):
    log = GrowthLog(
        plant_id=plant_id,
        height=data.height,
        leaf_count=data.leaf_count,
        health_score=data.health_score,
        note=data.note,
        image_url=data.image_url,
    )
    db.add(log)
    db.commit()
    return {"id": log.id}
