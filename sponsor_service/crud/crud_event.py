# sponsor_service/crud/crud_event.py
from typing import Optional

from sqlalchemy.orm import Session

from .base import CRUDBase
from sponsor_service.models.event import Event, EventEdition


class CRUDEvent(CRUDBase[Event]):
    pass


class CRUDEventEdition(CRUDBase[EventEdition]):
    def get_for_event(
        self, db: Session, *, edition_id: int, event_id: int
    ) -> Optional[EventEdition]:
        """Get an edition only if it belongs to the given event."""
        return (
            db.query(self.model)
            .filter(self.model.id == edition_id, self.model.event == event_id)
            .first()
        )

    def lock(self, db: Session, *, edition_id: int) -> Optional[EventEdition]:
        """
        Take an exclusive row lock on the edition for the rest of the
        current transaction.

        Every sponsor write for an (event, edition) goes through this lock,
        so duplicate checks and max(position) + 1 are computed by one
        transaction at a time.
        """
        return (
            db.query(self.model)
            .filter(self.model.id == edition_id)
            .with_for_update()
            .first()
        )


event = CRUDEvent(Event)
event_edition = CRUDEventEdition(EventEdition)
