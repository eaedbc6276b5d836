# sponsor_service/models/venue.py
from sqlalchemy import Column, Integer, String
from sponsor_service.db.base_class import Base


class Venue(Base):
    __tablename__ = "venue"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    city = Column(Integer, nullable=True)
    country = Column(String(2), nullable=True)
