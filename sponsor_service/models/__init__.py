# sponsor_service/models/__init__.py
# Import all models so Base.metadata knows every table.
# Order matters for foreign keys - referenced tables first.

from sponsor_service.db.base_class import Base
from sponsor_service.models.company import Company
from sponsor_service.models.venue import Venue
from sponsor_service.models.event import Event, EventEdition
from sponsor_service.models.contact import Contact, ContactEntityType
from sponsor_service.models.attachment import Attachment
from sponsor_service.models.event_sponsor import EventSponsor, SponsorStatus
from sponsor_service.models.review import PreReview, PostReview
