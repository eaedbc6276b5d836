# sponsor_service/models/event_sponsor.py
"""
EventSponsor model - one company's sponsorship of one event edition.

Rows are never physically removed. Deletion sets ``published`` to the
deleted marker (-1) and the row stays in place, keeping its position.
Ordering is per (event, edition) through ``position``.
"""

import enum
from sqlalchemy import (
    Column,
    Integer,
    String,
    SmallInteger,
    DateTime,
    ForeignKey,
    Index,
    func,
)
from sponsor_service.db.base_class import Base


class SponsorStatus(int, enum.Enum):
    DELETED = -1
    INACTIVE = 0
    ACTIVE = 1
    DRAFT = 2


class EventSponsor(Base):
    __tablename__ = "event_sponsors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("event.id"), nullable=False)
    event_edition = Column(Integer, ForeignKey("event_edition.id"), nullable=True)
    company_id = Column(Integer, ForeignKey("company.id"), nullable=True)  # null if name-only

    # Display
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=True)  # e.g., "Gold Sponsor"
    website = Column(String(500), nullable=True)
    logo = Column(Integer, ForeignKey("attachment.id"), nullable=True)
    position = Column(Integer, nullable=True)

    # Status
    published = Column(SmallInteger, nullable=False, default=SponsorStatus.ACTIVE.value)
    verified = Column(SmallInteger, nullable=True)
    verified_by = Column(Integer, nullable=True)
    verified_on = Column(DateTime(timezone=True), nullable=True)

    # Audit fields
    createdby = Column(Integer, nullable=True)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    modifiedby = Column(Integer, nullable=True)
    modified = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("ix_event_sponsors_edition_position", "event_id", "event_edition", "position"),
        Index("ix_event_sponsors_edition_company", "event_id", "event_edition", "company_id"),
    )

    @property
    def is_deleted(self) -> bool:
        return self.published == SponsorStatus.DELETED.value
