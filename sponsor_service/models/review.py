# sponsor_service/models/review.py
"""
Review models - the two-row audit trail written for every mutation.

A pre_review row captures the state before a change and a post_review row
the confirmed state after it. The post row points back at its pre row via
``review_id``. Both tables are append-only.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    func,
)
from sponsor_service.db.base_class import Base


class ReviewColumns:
    """Columns shared by pre_review and post_review."""

    id = Column(Integer, primary_key=True, autoincrement=True)

    # What was reviewed
    entity_type = Column(String(20), nullable=False)  # event, company, venue, publicApi, user
    entity_id = Column(Integer, nullable=False)
    entity_name = Column(String(255), nullable=True)
    title = Column(Text, nullable=True)
    remark = Column(Text, nullable=True)

    # M=Modify, C=Create, U=Update / E=Edit, Q=QC, R=Rehost
    review_type = Column(String(1), nullable=False, default="M")
    modify_type = Column(String(1), nullable=False, default="E")

    # Who
    by_user = Column(Integer, nullable=False)
    added_by = Column(Integer, nullable=True)
    qc_by = Column(Integer, nullable=True)

    # When
    added_on = Column(DateTime(timezone=True), nullable=True)
    qc_on = Column(DateTime(timezone=True), nullable=True)
    created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    system_verified = Column(Boolean, nullable=False, default=False)

    # Event-ish descriptors, copied from the payload when present
    website = Column(String(500), nullable=True)
    functionality = Column(String(50), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    online_event = Column(Integer, nullable=True)
    event_audience = Column(String(50), nullable=True)

    # Denormalized locality, resolved from the entity at write time
    city = Column(Integer, nullable=True)
    country = Column(String(2), nullable=True)
    company_id = Column(Integer, nullable=True)
    venue_id = Column(Integer, nullable=True)


class PreReview(ReviewColumns, Base):
    __tablename__ = "pre_review"

    content = Column(Text, nullable=True)
    status = Column(String(1), nullable=False, default="P")  # P, A, R, T

    __table_args__ = (Index("ix_pre_review_entity", "entity_type", "entity_id"),)


class PostReview(ReviewColumns, Base):
    __tablename__ = "post_review"

    content_approved = Column(Text, nullable=True)
    post_status = Column(String(1), nullable=False, default="A")  # A, R, P
    review_id = Column(Integer, ForeignKey("pre_review.id"), nullable=True)

    __table_args__ = (
        Index("ix_post_review_entity", "entity_type", "entity_id"),
        Index("ix_post_review_review_id", "review_id"),
    )
