# sponsor_service/services/positioning.py
import logging
from typing import Optional

from sqlalchemy.orm import Session

from sponsor_service import crud

logger = logging.getLogger(__name__)


def resolve_position(
    db: Session,
    *,
    event_id: int,
    edition_id: int,
    requested: Optional[int],
    prior: Optional[int],
    keeps_slot: bool,
    sponsor_id: Optional[int] = None,
) -> int:
    """
    Work out where a sponsor lands and make room for it.

    ``keeps_slot`` is True when an active sponsor is updated within its own
    edition; ``prior`` is then its current position. Anything else (a new
    row, a reclaimed or reactivated row, a move to another edition) is
    placed like a new sponsor.

    Must run inside the transaction that holds the edition lock.
    """
    if keeps_slot:
        if requested is None:
            if prior is not None:
                return prior
            return _append(db, event_id, edition_id)
        if requested == prior:
            return requested
        _make_room(db, event_id, edition_id, requested, sponsor_id)
        return requested

    if requested is None:
        return _append(db, event_id, edition_id)
    _make_room(db, event_id, edition_id, requested, sponsor_id)
    return requested


def _append(db: Session, event_id: int, edition_id: int) -> int:
    return crud.sponsor.max_position(db, event_id=event_id, edition_id=edition_id) + 1


def _make_room(
    db: Session, event_id: int, edition_id: int, position: int, sponsor_id: Optional[int]
) -> None:
    shifted = crud.sponsor.shift_positions(
        db,
        event_id=event_id,
        edition_id=edition_id,
        from_position=position,
        exclude_id=sponsor_id,
    )
    logger.debug(f"Shifted {shifted} sponsors at position >= {position} in edition {edition_id}")
