from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from db.database import Base
from datetime import datetime

class DiaryEntry(Base):
    __tablename__ = "diary"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(Integer, ForeignKey("plants.id"))
    content = Column(String)
    image_url = Column(String)
    type = Column(String)  # growth / care / disease
    created_at = Column(DateTime, default=datetime.utcnow)
