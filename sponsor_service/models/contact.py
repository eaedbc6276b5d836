# sponsor_service/models/contact.py
"""
Contact model - the point-of-contact (POC) table.

A row grants a user authority over an entity. Only published rows count.
"""

import enum
from sqlalchemy import Column, Integer, Index
from sponsor_service.db.base_class import Base


class ContactEntityType(int, enum.Enum):
    EVENT = 1
    COMPANY = 2


class Contact(Base):
    __tablename__ = "contact"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_reference = Column(Integer, nullable=False)
    entity_type = Column(Integer, nullable=False)  # ContactEntityType
    entity_id = Column(Integer, nullable=False)
    published = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        Index("ix_contact_user_entity", "user_reference", "entity_type", "entity_id"),
    )
