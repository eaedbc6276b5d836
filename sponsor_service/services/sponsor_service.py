# sponsor_service/services/sponsor_service.py
"""
Sponsor mutation transaction.

Everything from the authorization check to the sponsor write runs in the
request's database transaction and is committed once at the end. Any
failure rolls back the whole unit, including position shifts and newly
created logo attachments.

After the commit, and outside the transaction, the change is recorded in
the review log and announced to downstream consumers. Neither step can
turn a committed change into a failure response.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from sqlalchemy.orm import Session

from sponsor_service import crud
from sponsor_service.core.s3 import ObjectStorage
from sponsor_service.models.event_sponsor import EventSponsor, SponsorStatus
from sponsor_service.schemas.review import EntityType, ReviewData
from sponsor_service.schemas.sponsor import SponsorUpsertRequest, SponsorUpsertResponse
from sponsor_service.services.authorization import is_authorized
from sponsor_service.services.entity_resolver import CompanyDirectory, EntityResolver
from sponsor_service.services.errors import (
    DuplicateSponsorError,
    NotAuthorizedError,
    SponsorError,
    SponsorIdRequiredError,
    SponsorNotFoundError,
)
from sponsor_service.services.logo import LogoResolver
from sponsor_service.services.notifier import RelevanceNotifier
from sponsor_service.services.positioning import resolve_position
from sponsor_service.services.review_service import ReviewService
from sponsor_service.services.slot_detector import SlotKind, find_slot

logger = logging.getLogger(__name__)

UPSERT_SUCCESS_MESSAGE = "Sponsor processed successfully"
DELETE_SUCCESS_MESSAGE = "Sponsor deleted successfully"
INTERNAL_FAILURE_MESSAGE = "An error occurred while processing the sponsor"
REVIEW_REMARK = "auto saved by organizer"


@dataclass
class SponsorWrite:
    """Inputs of the write step, fully resolved before it runs."""

    event_id: int
    edition_id: int
    fields: Dict[str, Any]
    requested_position: Optional[int]
    target: Optional[EventSponsor] = None  # row to update; None creates one
    keeps_slot: bool = False


@dataclass
class SponsorMutation:
    """A committed change, handed to the post-commit steps."""

    action: str  # "sponsor_upsert" or "sponsor_deleted"
    sponsor: EventSponsor
    event_id: int
    edition_id: Optional[int]
    message: str
    prior: Optional[Dict[str, Any]] = None
    api_payload: Dict[str, Any] = field(default_factory=dict)


def snapshot(sponsor: EventSponsor) -> Dict[str, Any]:
    return {
        "sponsorId": sponsor.id,
        "event_edition": sponsor.event_edition,
        "name": sponsor.name,
        "title": sponsor.title,
        "company_id": sponsor.company_id,
        "logo": sponsor.logo,
        "position": sponsor.position,
        "published": sponsor.published,
    }


class SponsorService:
    def __init__(
        self,
        *,
        storage: ObjectStorage,
        notifier: RelevanceNotifier,
        reviews: ReviewService | None = None,
        company_directory: CompanyDirectory | None = None,
    ):
        self.logos = LogoResolver(storage)
        self.notifier = notifier
        self.reviews = reviews or ReviewService()
        self.resolver = EntityResolver(company_directory)

    # --- public operations ---

    def upsert(
        self, db: Session, payload: SponsorUpsertRequest, user_id: int
    ) -> SponsorUpsertResponse:
        """Create, update or (with ``published == -1``) delete a sponsor."""
        logger.info(f"Upserting sponsor for event {payload.event_id} by user {user_id}")

        def mutate() -> SponsorMutation:
            self._authorize(db, user_id, payload.event_id)
            if payload.is_deletion:
                if not payload.sponsor_id:
                    raise SponsorIdRequiredError()
                return self._delete(db, payload.sponsor_id, payload.event_id, user_id)
            return self._create_or_update(db, payload, user_id)

        return self._run(db, payload.event_id, user_id, mutate)

    def soft_delete(
        self, db: Session, sponsor_id: int, event_id: int, user_id: int
    ) -> SponsorUpsertResponse:
        """Mark a sponsor deleted. Other sponsors keep their positions."""

        def mutate() -> SponsorMutation:
            self._authorize(db, user_id, event_id)
            return self._delete(db, sponsor_id, event_id, user_id)

        return self._run(db, event_id, user_id, mutate)

    # --- transaction boundary ---

    def _run(
        self,
        db: Session,
        event_id: int,
        user_id: int,
        mutate: Callable[[], SponsorMutation],
    ) -> SponsorUpsertResponse:
        try:
            mutation = mutate()
            db.commit()
        except SponsorError as e:
            db.rollback()
            logger.info(f"Sponsor change for event {event_id} rejected: {e.message}")
            return SponsorUpsertResponse.failure(e.message)
        except Exception:
            db.rollback()
            logger.error(
                f"Error while changing sponsors of event {event_id}",
                exc_info=True,
                extra={"event_id": event_id, "user_id": user_id},
            )
            return SponsorUpsertResponse.failure(INTERNAL_FAILURE_MESSAGE)

        sponsor_id = mutation.sponsor.id
        self._record_review(db, mutation, user_id)
        self._notify(mutation)
        return SponsorUpsertResponse.success(mutation.message, sponsor_id)

    # --- steps inside the transaction ---

    @staticmethod
    def _authorize(db: Session, user_id: int, event_id: int) -> None:
        if not is_authorized(db, user_id, event_id):
            raise NotAuthorizedError()

    def _create_or_update(
        self, db: Session, payload: SponsorUpsertRequest, user_id: int
    ) -> SponsorMutation:
        entities = self.resolver.resolve(db, payload, user_id)
        edition_id = entities.edition_id

        # Serializes all sponsor writes of this edition until commit/rollback
        crud.event_edition.lock(db, edition_id=edition_id)

        target = None
        if payload.sponsor_id:
            target = crud.sponsor.get(db, payload.sponsor_id)
            if target is None or target.event_id != payload.event_id:
                raise SponsorNotFoundError()

        slot = find_slot(
            db,
            event_id=payload.event_id,
            edition_id=edition_id,
            company_id=entities.company_id,
            sponsor_id=payload.sponsor_id,
        )
        if slot.kind is SlotKind.ACTIVE_CONFLICT:
            if payload.sponsor_id:
                raise DuplicateSponsorError("Sponsor with this company already exists")
            raise DuplicateSponsorError()
        if slot.kind is SlotKind.RECLAIMABLE:
            target = crud.sponsor.get(db, slot.sponsor_id)
            logger.info(
                f"Reusing deleted sponsor {slot.sponsor_id} for company {entities.company_id}"
            )

        prior = snapshot(target) if target is not None else None
        logo_id = self.logos.resolve_logo(db, payload.logo, entities.company_id, user_id)

        write = SponsorWrite(
            event_id=payload.event_id,
            edition_id=edition_id,
            fields=self._sponsor_fields(payload, entities.sponsor_name, entities.company_id, logo_id, user_id),
            requested_position=payload.position,
            target=target,
            keeps_slot=(
                target is not None
                and not target.is_deleted
                and target.event_edition == edition_id
            ),
        )
        sponsor = self._write(db, write, user_id)

        return SponsorMutation(
            action="sponsor_upsert",
            sponsor=sponsor,
            event_id=payload.event_id,
            edition_id=edition_id,
            message=UPSERT_SUCCESS_MESSAGE,
            prior=prior,
            api_payload=payload.model_dump(by_alias=True, exclude_none=True, exclude={"logo"}),
        )

    @staticmethod
    def _sponsor_fields(
        payload: SponsorUpsertRequest,
        name: str,
        company_id: Optional[int],
        logo_id: Optional[int],
        user_id: int,
    ) -> Dict[str, Any]:
        # Fields the request leaves out are not touched on update
        fields: Dict[str, Any] = {
            "name": name,
            "published": (
                payload.published if payload.published is not None else SponsorStatus.ACTIVE.value
            ),
        }
        if payload.title is not None:
            fields["title"] = payload.title
        if payload.website is not None:
            fields["website"] = payload.website
        if company_id is not None:
            fields["company_id"] = company_id
        if logo_id is not None:
            fields["logo"] = logo_id
        if payload.verified:
            fields["verified"] = 1
            fields["verified_on"] = datetime.now(timezone.utc)
            fields["verified_by"] = user_id
        return fields

    @staticmethod
    def _write(db: Session, write: SponsorWrite, user_id: int) -> EventSponsor:
        target = write.target
        position = resolve_position(
            db,
            event_id=write.event_id,
            edition_id=write.edition_id,
            requested=write.requested_position,
            prior=target.position if write.keeps_slot else None,
            keeps_slot=write.keeps_slot,
            sponsor_id=target.id if target is not None else None,
        )
        data = {**write.fields, "position": position, "event_edition": write.edition_id}

        if target is not None:
            return crud.sponsor.update(db, db_obj=target, data=data, user_id=user_id)
        return crud.sponsor.create(
            db, data={**data, "event_id": write.event_id}, user_id=user_id
        )

    @staticmethod
    def _delete(db: Session, sponsor_id: int, event_id: int, user_id: int) -> SponsorMutation:
        sponsor = crud.sponsor.get(db, sponsor_id)
        if sponsor is None or sponsor.event_id != event_id:
            raise SponsorNotFoundError()

        if sponsor.event_edition:
            crud.event_edition.lock(db, edition_id=sponsor.event_edition)
        if sponsor.is_deleted:
            logger.info(f"Sponsor {sponsor_id} is already deleted, refreshing the marker")

        crud.sponsor.mark_deleted(db, db_obj=sponsor, user_id=user_id)
        return SponsorMutation(
            action="sponsor_deleted",
            sponsor=sponsor,
            event_id=event_id,
            edition_id=sponsor.event_edition,
            message=DELETE_SUCCESS_MESSAGE,
            api_payload={"eventId": event_id, "sponsorId": sponsor_id},
        )

    # --- post-commit side effects ---

    def _record_review(self, db: Session, mutation: SponsorMutation, user_id: int) -> None:
        try:
            pre, post = self._review_entries(mutation, user_id)
            pre_review_id = self.reviews.record_pre(db, pre)
            self.reviews.record_post(db, post, pre_review_id=pre_review_id)
        except Exception:
            db.rollback()
            logger.error(
                f"Review log failed for {mutation.action} on event {mutation.event_id}",
                exc_info=True,
                extra={"event_id": mutation.event_id, "user_id": user_id},
            )

    @staticmethod
    def _review_entries(mutation: SponsorMutation, user_id: int) -> tuple[ReviewData, ReviewData]:
        sponsor = mutation.sponsor
        deleted = mutation.action == "sponsor_deleted"

        if deleted:
            pre_content = {"sponsorId": sponsor.id}
        elif mutation.prior is not None:
            pre_content = {
                key: mutation.prior[key] for key in ("sponsorId", "title", "company_id", "logo")
            }
        else:
            pre_content = {
                "title": sponsor.title,
                "company_id": sponsor.company_id,
                "logo": sponsor.logo,
            }

        pre = ReviewData(
            entity_type=EntityType.EVENT,
            entity_id=mutation.event_id,
            title="sponsor deleted" if deleted else "sponsor",
            by_user=user_id,
            review_type="M",
            modify_type="E",
            remark=REVIEW_REMARK,
            status="A",
            content=pre_content,
        )

        post_update: Dict[str, Any] = {
            "content": {
                "sponsorId": sponsor.id,
                "event_edition": sponsor.event_edition,
                "title": sponsor.title,
                "company_id": sponsor.company_id,
                "logo": sponsor.logo,
            }
        }
        if mutation.prior is not None and not deleted:
            post_update.update(
                old_data=mutation.prior,
                new_data=snapshot(sponsor),
                api_payload=mutation.api_payload,
            )
        return pre, pre.model_copy(update=post_update)

    def _notify(self, mutation: SponsorMutation) -> None:
        try:
            self.notifier.notify_sponsor_change(mutation.event_id, mutation.edition_id)
        except Exception as e:
            # Log but don't fail the sponsor change if the publish fails
            logger.error(f"Failed to publish sponsor change for event {mutation.event_id}: {e}")
