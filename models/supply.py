from sqlalchemy import Column, Integer, Float, String
from db.database import Base

class Supply(Base):
    __tablename__ = "supplies"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    category = Column(String)
    description = Column(String)
    price = Column(Float)
    usage_guide = Column(String)
    side_effects = Column(String)
    store_url = Column(String)
    image_url = Column(String)
