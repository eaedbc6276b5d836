# sponsor_service/services/authorization.py
from sqlalchemy.orm import Session

from sponsor_service import crud
from sponsor_service.models.contact import ContactEntityType


def is_authorized(db: Session, user_id: int, event_id: int) -> bool:
    """A user may change an event's sponsors only as its point of contact."""
    return crud.contact.is_point_of_contact(
        db, user_id=user_id, entity_id=event_id, entity_type=ContactEntityType.EVENT
    )
