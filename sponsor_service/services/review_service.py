# sponsor_service/services/review_service.py
"""
Two-phase review (audit) logger shared by every kind of mutation.

Each change is recorded as a pre_review row (state before / intent) and a
post_review row (confirmed state) that points back at the pre row. In
this service every review is auto-approved, so no QC step sits between
the two rows.

Locality fields (city, country, company, venue) are copied onto each row
from the reviewed entity. How they are looked up depends on the entity
type; see LOCALITY_LOOKUPS.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sponsor_service import crud
from sponsor_service.schemas.review import EntityType, ReviewData, ReviewWorkflowResult

logger = logging.getLogger(__name__)

LocalityLookup = Callable[[Session, int], Dict[str, Any]]


def _event_locality(db: Session, entity_id: int) -> Dict[str, Any]:
    event = crud.event.get(db, entity_id)
    if event is None:
        return {}
    fields = {"city": event.city, "country": event.country}
    if event.event_edition:
        edition = crud.event_edition.get(db, event.event_edition)
        if edition is not None:
            fields["company_id"] = edition.company_id
            fields["venue_id"] = edition.venue
    return fields


def _venue_locality(db: Session, entity_id: int) -> Dict[str, Any]:
    venue = crud.venue.get(db, entity_id)
    if venue is None:
        return {}
    return {"city": venue.city, "country": venue.country, "venue_id": entity_id}


def _company_locality(db: Session, entity_id: int) -> Dict[str, Any]:
    company = crud.company.get(db, entity_id)
    if company is None:
        return {}
    return {"city": company.city, "country": company.country, "company_id": entity_id}


# publicApi and user entities carry no locality.
LOCALITY_LOOKUPS: Dict[EntityType, LocalityLookup] = {
    EntityType.EVENT: _event_locality,
    EntityType.VENUE: _venue_locality,
    EntityType.COMPANY: _company_locality,
}


class ReviewService:
    def record_pre(self, db: Session, data: ReviewData) -> int:
        """Write a pre-review row and return its id."""
        now = datetime.now(timezone.utc)
        status = data.status or "P"
        fields = {
            **self._common_fields(db, data, now),
            "content": self._serialize(data.content),
            "qc_on": (data.qc_on or now) if status == "A" else None,
            "status": status,
        }
        try:
            row = crud.pre_review.create(db, fields=fields)
        except SQLAlchemyError:
            db.rollback()
            logger.error(
                f"Failed to create pre-review for {data.entity_type.value} {data.entity_id}",
                exc_info=True,
            )
            raise

        logger.info(f"Created pre-review {row.id} for {data.entity_type.value} {data.entity_id}")
        return row.id

    def record_post(
        self, db: Session, data: ReviewData, pre_review_id: Optional[int] = None
    ) -> int:
        """Write a post-review row, linked to ``pre_review_id`` when given."""
        now = datetime.now(timezone.utc)
        fields = {
            **self._common_fields(db, data, now),
            "content_approved": self._post_content(data, now),
            "qc_on": now,
            "post_status": data.post_status or "A",
            "review_id": pre_review_id,
        }
        try:
            row = crud.post_review.create(db, fields=fields)
        except SQLAlchemyError:
            db.rollback()
            logger.error(
                f"Failed to create post-review for {data.entity_type.value} {data.entity_id}",
                exc_info=True,
            )
            raise

        logger.info(f"Created post-review {row.id} for {data.entity_type.value} {data.entity_id}")
        return row.id

    def record_workflow(self, db: Session, data: ReviewData) -> ReviewWorkflowResult:
        """Pre then auto-approved post. Failures are logged, never raised."""
        try:
            pre_review_id = self.record_pre(db, data)
            approved = data.model_copy(update={"post_status": "A"})
            post_review_id = self.record_post(db, approved, pre_review_id=pre_review_id)
        except Exception:
            logger.error(
                f"Failed to create review workflow for {data.entity_type.value} {data.entity_id}",
                exc_info=True,
            )
            return ReviewWorkflowResult()

        return ReviewWorkflowResult(pre_review_id=pre_review_id, post_review_id=post_review_id)

    # --- helpers ---

    def _common_fields(self, db: Session, data: ReviewData, now: datetime) -> Dict[str, Any]:
        return {
            "entity_type": data.entity_type.value,
            "entity_id": data.entity_id,
            "entity_name": data.entity_name,
            "title": self._title(data),
            "remark": data.remark,
            "review_type": data.review_type or "M",
            "modify_type": data.modify_type or "E",
            "by_user": data.by_user,
            "added_by": data.added_by or data.by_user,
            "qc_by": data.qc_by or data.by_user,
            "added_on": data.added_on or now,
            "system_verified": bool(data.system_verified),
            "website": data.website,
            "functionality": data.functionality,
            "start_date": data.start_date,
            "end_date": data.end_date,
            "online_event": data.online_event,
            "event_audience": data.event_audience,
            **self._locality(db, data),
        }

    def _locality(self, db: Session, data: ReviewData) -> Dict[str, Any]:
        fields: Dict[str, Any] = {
            "city": None,
            "country": None,
            "company_id": None,
            "venue_id": None,
        }

        lookup = LOCALITY_LOOKUPS.get(data.entity_type)
        if lookup is not None and data.entity_id:
            # A failed SELECT must not abort the transaction the review insert runs in
            savepoint = db.begin_nested()
            try:
                fields.update(lookup(db, data.entity_id))
                savepoint.commit()
            except SQLAlchemyError as e:
                savepoint.rollback()
                logger.warning(
                    f"Failed to build locality fields for {data.entity_type.value} "
                    f"{data.entity_id}: {e}"
                )

        # Caller-provided values win
        if data.city_id is not None:
            fields["city"] = data.city_id
        if data.country_id is not None:
            fields["country"] = data.country_id
        if data.company_id is not None:
            fields["company_id"] = data.company_id
        if data.venue_id is not None:
            fields["venue_id"] = data.venue_id

        return fields

    @staticmethod
    def _title(data: ReviewData) -> str:
        if data.title:
            return data.title

        title: Dict[str, Any] = {
            "entity_type": data.entity_type.value,
            "entity_id": data.entity_id,
            "entity_name": data.entity_name or f"{data.entity_type.value} {data.entity_id}",
        }
        if data.start_date and data.end_date:
            title["date"] = f"{data.start_date.isoformat()} - {data.end_date.isoformat()}"
        return json.dumps(title)

    @staticmethod
    def _serialize(content: Any) -> Optional[str]:
        if content is None:
            return None
        if isinstance(content, str):
            return content
        return json.dumps(content, default=str)

    def _post_content(self, data: ReviewData, now: datetime) -> Optional[str]:
        # Updates: keep both sides of the change next to the request that caused it
        if data.old_data is not None and data.new_data is not None:
            return json.dumps(
                {
                    "oldData": data.old_data,
                    "newData": data.new_data,
                    "apiPayload": data.api_payload,
                    "timestamp": now.isoformat(),
                },
                default=str,
            )
        return self._serialize(data.content)
