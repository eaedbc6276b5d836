# sponsor_service/crud/crud_contact.py
from sqlalchemy.orm import Session

from .base import CRUDBase
from sponsor_service.models.contact import Contact, ContactEntityType


class CRUDContact(CRUDBase[Contact]):
    def is_point_of_contact(
        self,
        db: Session,
        *,
        user_id: int,
        entity_id: int,
        entity_type: ContactEntityType = ContactEntityType.EVENT,
    ) -> bool:
        """True if the user is an active point of contact for the entity."""
        contact = (
            db.query(self.model.id)
            .filter(
                self.model.user_reference == user_id,
                self.model.entity_type == entity_type.value,
                self.model.entity_id == entity_id,
                self.model.published == 1,
            )
            .first()
        )
        return contact is not None


contact = CRUDContact(Contact)
