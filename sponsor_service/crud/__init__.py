# sponsor_service/crud/__init__.py

from .crud_attachment import attachment
from .crud_company import company, venue
from .crud_contact import contact
from .crud_event import event, event_edition
from .crud_review import pre_review, post_review
from .crud_sponsor import sponsor
