# sponsor_service/crud/base.py
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from sponsor_service.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """
    Read helpers shared by every table.

    Writes live on the subclasses because each table has its own rules
    (sponsors shift positions, reviews are append-only, ...). None of the
    helpers commit; the caller owns the transaction.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: int) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

