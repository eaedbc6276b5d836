# sponsor_service/crud/crud_attachment.py
from sqlalchemy.orm import Session

from .base import CRUDBase
from sponsor_service.models.attachment import Attachment


class CRUDAttachment(CRUDBase[Attachment]):
    def create_image(
        self, db: Session, *, key: str, cdn_url: str, user_id: int
    ) -> Attachment:
        """Record an uploaded image. Flushed, not committed."""
        db_obj = self.model(
            file_type="image",
            value=key,
            cdn_url=cdn_url,
            published=True,
            createdby=user_id,
        )
        db.add(db_obj)
        db.flush()
        return db_obj


attachment = CRUDAttachment(Attachment)
