# sponsor_service/services/entity_resolver.py
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from sponsor_service import crud
from sponsor_service.models.company import Company
from sponsor_service.models.event import Event
from sponsor_service.schemas.sponsor import SponsorUpsertRequest
from sponsor_service.services.errors import (
    EventNotFoundError,
    InvalidCompanyError,
    InvalidEditionError,
    MissingSponsorIdentityError,
    NoEditionError,
)

logger = logging.getLogger(__name__)


class CompanyDirectory:
    """Collaborator that owns company records."""

    def create_by_name(self, db: Session, *, name: str, user_id: int) -> Company:
        raise NotImplementedError("Creating a company from a sponsor name is not supported")


@dataclass
class ResolvedEntities:
    event: Event
    edition_id: int
    company: Optional[Company]
    sponsor_name: str

    @property
    def company_id(self) -> Optional[int]:
        return self.company.id if self.company else None


class EntityResolver:
    def __init__(self, company_directory: CompanyDirectory | None = None):
        self.company_directory = company_directory or CompanyDirectory()

    def resolve(
        self, db: Session, payload: SponsorUpsertRequest, user_id: int
    ) -> ResolvedEntities:
        event = crud.event.get(db, payload.event_id)
        if event is None:
            raise EventNotFoundError()

        edition_id = self._resolve_edition(db, event, payload.edition_id)
        company = self._resolve_company(db, payload, user_id)

        sponsor_name = payload.name or (company.name if company else None)
        if not sponsor_name:
            raise MissingSponsorIdentityError("Sponsor name is required")

        return ResolvedEntities(
            event=event, edition_id=edition_id, company=company, sponsor_name=sponsor_name
        )

    def _resolve_edition(self, db: Session, event: Event, edition_id: Optional[int]) -> int:
        if edition_id:
            if crud.event_edition.get_for_event(db, edition_id=edition_id, event_id=event.id) is None:
                raise InvalidEditionError()
            return edition_id
        if not event.event_edition:
            raise NoEditionError()
        return event.event_edition

    def _resolve_company(
        self, db: Session, payload: SponsorUpsertRequest, user_id: int
    ) -> Optional[Company]:
        if payload.company_id:
            company = crud.company.get(db, payload.company_id)
            if company is None:
                raise InvalidCompanyError()
            return company

        if not payload.name:
            raise MissingSponsorIdentityError()

        try:
            return self.company_directory.create_by_name(db, name=payload.name, user_id=user_id)
        except NotImplementedError:
            # Name-only sponsor: no company row behind it
            logger.info(f"No company created for sponsor name '{payload.name}', continuing name-only")
            return None
