from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey
from db.database import Base
from datetime import datetime

class GrowthLog(Base):
    __tablename__ = "growth_logs"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(Integer, ForeignKey("plants.id"))
    height = Column(Float)
    leaf_count = Column(Integer)
    health_score = Column(Integer)
    note = Column(String)
    image_url = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)
