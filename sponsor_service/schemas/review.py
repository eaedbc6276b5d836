# sponsor_service/schemas/review.py
"""
Payload contract for the review (audit) logger.

Any mutator - sponsors today, events/companies/venues elsewhere - describes
its change with a ReviewData and hands it to ReviewService.
"""

import enum
from datetime import date, datetime
from typing import Any, Optional
from pydantic import BaseModel


class EntityType(str, enum.Enum):
    EVENT = "event"
    COMPANY = "company"
    VENUE = "venue"
    PUBLIC_API = "publicApi"
    USER = "user"


class ReviewData(BaseModel):
    # Entity information
    entity_type: EntityType
    entity_id: int
    entity_name: Optional[str] = None

    # Review metadata
    review_type: Optional[str] = None  # M=Modify, C=Create, U=Update
    modify_type: Optional[str] = None  # E=Edit, Q=QC, R=Rehost
    title: Optional[str] = None
    content: Optional[Any] = None  # str is stored as-is, anything else as JSON
    remark: Optional[str] = None

    # User information
    by_user: int
    added_by: Optional[int] = None
    qc_by: Optional[int] = None

    # Timestamps
    added_on: Optional[datetime] = None
    qc_on: Optional[datetime] = None

    # Status and workflow
    status: Optional[str] = None  # P=Pending, A=Approved, R=Rejected, T=Trash
    post_status: Optional[str] = None  # A, R, P
    system_verified: Optional[bool] = None

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    website: Optional[str] = None
    functionality: Optional[str] = None
    event_audience: Optional[str] = None
    online_event: Optional[int] = None

    # Locality overrides; when set they win over the looked-up values
    city_id: Optional[int] = None
    country_id: Optional[str] = None
    company_id: Optional[int] = None
    venue_id: Optional[int] = None

    # Update snapshots for structured post-review content
    old_data: Optional[Any] = None
    new_data: Optional[Any] = None
    api_payload: Optional[Any] = None


class ReviewWorkflowResult(BaseModel):
    pre_review_id: Optional[int] = None
    post_review_id: Optional[int] = None
