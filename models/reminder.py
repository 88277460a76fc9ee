from sqlalchemy import Column, Integer, String, ForeignKey
from db.database import Base

class Reminder(Base):
    __tablename__ = "reminders"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(Integer, ForeignKey("plants.id"))
    title = Column(String)
    time = Column(String)
    status = Column(String, default="pending")  # pending / completed
