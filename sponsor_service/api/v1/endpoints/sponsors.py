# sponsor_service/api/v1/endpoints/sponsors.py
"""
API endpoints for sponsor management.

A single upsert endpoint lets an event's point of contact:
- Add a sponsor to an edition (appended, or inserted at a position)
- Update or move an existing sponsor
- Delete a sponsor (``published: -1``)

Business failures are not HTTP errors: the endpoint always answers 200
with ``status.code`` 1 (success) or 0 (failure, see ``status.message``).
"""

from fastapi import APIRouter, Depends
from kafka import KafkaProducer
from sqlalchemy.orm import Session

from sponsor_service.api import deps
from sponsor_service.core.kafka_producer import get_kafka_producer
from sponsor_service.core.s3 import ObjectStorage, get_object_storage
from sponsor_service.db.session import get_db
from sponsor_service.schemas.sponsor import SponsorUpsertRequest, SponsorUpsertResponse
from sponsor_service.schemas.token import TokenPayload
from sponsor_service.services.notifier import RelevanceNotifier
from sponsor_service.services.sponsor_service import SponsorService

router = APIRouter(prefix="/sponsor", tags=["Sponsor API"])


@router.put("/upsert", response_model=SponsorUpsertResponse)
def upsert_sponsor(
    payload: SponsorUpsertRequest,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
    producer: KafkaProducer | None = Depends(get_kafka_producer),
    storage: ObjectStorage = Depends(get_object_storage),
):
    """Create, update or delete an event sponsor."""
    service = SponsorService(storage=storage, notifier=RelevanceNotifier(producer))
    return service.upsert(db, payload, current_user.user_id)
