# sponsor_service/crud/crud_review.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from .base import CRUDBase
from sponsor_service.models.review import PreReview, PostReview


class CRUDReview(CRUDBase):
    """Review rows are immutable: inserts and reads only."""

    def create(self, db: Session, *, fields: Dict[str, Any]):
        db_obj = self.model(**fields)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_by_entity(
        self, db: Session, *, entity_type: str, entity_id: int
    ) -> List[Any]:
        return (
            db.query(self.model)
            .filter(
                self.model.entity_type == entity_type,
                self.model.entity_id == entity_id,
            )
            .order_by(self.model.id)
            .all()
        )


pre_review = CRUDReview(PreReview)
post_review = CRUDReview(PostReview)
