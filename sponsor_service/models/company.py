# sponsor_service/models/company.py
from sqlalchemy import Column, Integer, String
from sponsor_service.db.base_class import Base


class Company(Base):
    __tablename__ = "company"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    website = Column(String(500), nullable=True)
    city = Column(Integer, nullable=True)
    country = Column(String(2), nullable=True)
