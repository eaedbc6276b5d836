# sponsor_service/crud/crud_sponsor.py
"""
Query and write helpers for event sponsors.

None of these commit. They are building blocks of the sponsor mutation
transaction in services/sponsor_service.py, which commits or rolls back
the whole unit.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from .base import CRUDBase
from sponsor_service.models.event_sponsor import EventSponsor, SponsorStatus


class CRUDSponsor(CRUDBase[EventSponsor]):

    def get_for_company(
        self, db: Session, *, event_id: int, edition_id: int, company_id: int
    ) -> List[EventSponsor]:
        """Every row (deleted ones too) of a company in an edition, newest first."""
        return (
            db.query(self.model)
            .filter(
                self.model.event_id == event_id,
                self.model.event_edition == edition_id,
                self.model.company_id == company_id,
            )
            .order_by(self.model.id.desc())
            .all()
        )

    def max_position(self, db: Session, *, event_id: int, edition_id: int) -> int:
        """Highest position used in the edition, deleted rows included; 0 if empty."""
        result = (
            db.query(func.max(self.model.position))
            .filter(
                self.model.event_id == event_id,
                self.model.event_edition == edition_id,
            )
            .scalar()
        )
        return result or 0

    def shift_positions(
        self,
        db: Session,
        *,
        event_id: int,
        edition_id: int,
        from_position: int,
        exclude_id: Optional[int] = None,
    ) -> int:
        """Move every active sponsor at position >= from_position down one slot."""
        query = db.query(self.model).filter(
            self.model.event_id == event_id,
            self.model.event_edition == edition_id,
            self.model.published != SponsorStatus.DELETED.value,
            self.model.position >= from_position,
        )
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.update(
            {self.model.position: self.model.position + 1},
            synchronize_session="fetch",
        )

    def create(self, db: Session, *, data: Dict[str, Any], user_id: int) -> EventSponsor:
        db_obj = self.model(
            **data,
            createdby=user_id,
            created=datetime.now(timezone.utc),
        )
        db.add(db_obj)
        db.flush()
        return db_obj

    def update(
        self, db: Session, *, db_obj: EventSponsor, data: Dict[str, Any], user_id: int
    ) -> EventSponsor:
        for field, value in data.items():
            setattr(db_obj, field, value)
        db_obj.modifiedby = user_id
        db_obj.modified = datetime.now(timezone.utc)
        db.add(db_obj)
        db.flush()
        return db_obj

    def mark_deleted(self, db: Session, *, db_obj: EventSponsor, user_id: int) -> EventSponsor:
        """Soft delete. Positions of the other sponsors are left alone."""
        return self.update(
            db,
            db_obj=db_obj,
            data={"published": SponsorStatus.DELETED.value},
            user_id=user_id,
        )


sponsor = CRUDSponsor(EventSponsor)
