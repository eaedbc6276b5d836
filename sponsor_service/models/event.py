# sponsor_service/models/event.py
from sqlalchemy import Column, Integer, String, Date, ForeignKey, Index
from sponsor_service.db.base_class import Base


class Event(Base):
    __tablename__ = "event"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    city = Column(Integer, nullable=True)
    country = Column(String(2), nullable=True)  # ISO 3166-1 alpha-2
    # Current (primary) edition. Not a declared FK: event and
    # event_edition reference each other.
    event_edition = Column(Integer, nullable=True, index=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)


class EventEdition(Base):
    __tablename__ = "event_edition"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event = Column(Integer, ForeignKey("event.id"), nullable=False)
    edition = Column(Integer, nullable=True)  # ordinal of the occurrence
    company_id = Column(Integer, ForeignKey("company.id"), nullable=True)  # organizer
    venue = Column(Integer, ForeignKey("venue.id"), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    __table_args__ = (Index("ix_event_edition_event", "event"),)
