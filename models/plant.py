from sqlalchemy import Column, Integer, String, DateTime
from db.database import Base
from datetime import datetime

class Plant(Base):
    __tablename__ = "plants"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    species = Column(String)
    age = Column(String)
    planting_date = Column(String)
    location = Column(String)
    health_status = Column(String)
    last_care = Column(String)
    image_url = Column(String)
    category = Column(String)  # fruit / ornamental / indoor / outdoor
    created_at = Column(DateTime, default=datetime.utcnow)
