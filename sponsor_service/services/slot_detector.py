# sponsor_service/services/slot_detector.py
import enum
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from sponsor_service import crud


class SlotKind(str, enum.Enum):
    NONE = "none"
    ACTIVE_CONFLICT = "active_conflict"
    RECLAIMABLE = "reclaimable"


@dataclass(frozen=True)
class Slot:
    kind: SlotKind
    sponsor_id: Optional[int] = None


def find_slot(
    db: Session,
    *,
    event_id: int,
    edition_id: int,
    company_id: Optional[int],
    sponsor_id: Optional[int] = None,
) -> Slot:
    """
    Classify the company's existing rows in the edition.

    ``sponsor_id`` is the row the caller is updating (None when creating).
    Another active row for the same company is a conflict. When creating,
    a soft-deleted row for the company is handed back for reuse.
    """
    if company_id is None:
        return Slot(SlotKind.NONE)

    rows = crud.sponsor.get_for_company(
        db, event_id=event_id, edition_id=edition_id, company_id=company_id
    )

    for row in rows:
        if not row.is_deleted and row.id != sponsor_id:
            return Slot(SlotKind.ACTIVE_CONFLICT, row.id)

    if sponsor_id is None:
        for row in rows:
            if row.is_deleted:
                return Slot(SlotKind.RECLAIMABLE, row.id)

    return Slot(SlotKind.NONE)
