from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey
from db.database import Base
from datetime import datetime

class Expense(Base):
    __tablename__ = "expenses"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(Integer, ForeignKey("plants.id"))
    type = Column(String)  # fertilizer / water / seed / other
    amount = Column(Float)
    description = Column(String)
    date = Column(DateTime, default=datetime.utcnow)
