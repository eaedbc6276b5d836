from datetime import date

from sqlalchemy.orm import Session

from sponsor_service.models.company import Company
from sponsor_service.models.contact import Contact, ContactEntityType
from sponsor_service.models.event import Event, EventEdition
from sponsor_service.models.venue import Venue


def create_company(db: Session, name: str = "Acme Corp", city: int = 7, country: str = "DE") -> Company:
    company = Company(name=name, website="https://acme.test", city=city, country=country)
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def create_venue(db: Session, name: str = "Messe Hall", city: int = 7, country: str = "DE") -> Venue:
    venue = Venue(name=name, city=city, country=country)
    db.add(venue)
    db.commit()
    db.refresh(venue)
    return venue


def create_event_with_edition(
    db: Session,
    organizer: Company | None = None,
    venue: Venue | None = None,
) -> tuple[Event, EventEdition]:
    """
    Creates an event and makes a fresh edition its current one.
    """
    event = Event(
        name="Test Expo",
        city=12,
        country="IN",
        start_date=date(2026, 11, 2),
        end_date=date(2026, 11, 4),
    )
    db.add(event)
    db.flush()

    edition = EventEdition(
        event=event.id,
        edition=1,
        company_id=organizer.id if organizer else None,
        venue=venue.id if venue else None,
        start_date=event.start_date,
        end_date=event.end_date,
    )
    db.add(edition)
    db.flush()

    event.event_edition = edition.id
    db.commit()
    db.refresh(event)
    db.refresh(edition)
    return event, edition


def add_edition(db: Session, event: Event, number: int = 2) -> EventEdition:
    edition = EventEdition(event=event.id, edition=number)
    db.add(edition)
    db.commit()
    db.refresh(edition)
    return edition


def make_point_of_contact(db: Session, user_id: int, event_id: int) -> Contact:
    contact = Contact(
        user_reference=user_id,
        entity_type=ContactEntityType.EVENT.value,
        entity_id=event_id,
        published=1,
    )
    db.add(contact)
    db.commit()
    return contact
