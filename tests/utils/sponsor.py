from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from sponsor_service.models.attachment import Attachment
from sponsor_service.models.event_sponsor import EventSponsor, SponsorStatus


def create_sponsor(
    db: Session,
    *,
    event_id: int,
    edition_id: int,
    position: int,
    company_id: int | None = None,
    name: str = "Sponsor",
    published: int = SponsorStatus.ACTIVE.value,
) -> EventSponsor:
    """
    Inserts a sponsor row directly, bypassing the service.
    """
    sponsor = EventSponsor(
        event_id=event_id,
        event_edition=edition_id,
        company_id=company_id,
        name=name,
        position=position,
        published=published,
        createdby=1,
        created=datetime.now(timezone.utc),
    )
    db.add(sponsor)
    db.commit()
    db.refresh(sponsor)
    return sponsor


def create_attachment(db: Session, key: str = "company/1/logo.png") -> Attachment:
    attachment = Attachment(
        file_type="image", value=key, cdn_url=f"https://cdn.test/{key}", createdby=1
    )
    db.add(attachment)
    db.commit()
    db.refresh(attachment)
    return attachment


def sponsors_in_edition(
    db: Session, *, event_id: int, edition_id: int, include_deleted: bool = False
) -> List[EventSponsor]:
    """
    Sponsor rows of an edition in display order.
    """
    query = db.query(EventSponsor).filter(
        EventSponsor.event_id == event_id, EventSponsor.event_edition == edition_id
    )
    if not include_deleted:
        query = query.filter(EventSponsor.published != SponsorStatus.DELETED.value)
    return query.order_by(EventSponsor.position, EventSponsor.id).all()
