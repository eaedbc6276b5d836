# sponsor_service/models/attachment.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from sponsor_service.db.base_class import Base


class Attachment(Base):
    __tablename__ = "attachment"

    id = Column(Integer, primary_key=True, autoincrement=True)
    file_type = Column(String(50), nullable=False)  # e.g., "image"
    value = Column(String(500), nullable=False)  # storage key
    cdn_url = Column(String(1000), nullable=True)
    published = Column(Boolean, nullable=False, default=True)
    createdby = Column(Integer, nullable=True)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
