# sponsor_service/services/logo.py
import logging
import re
import time
from typing import Optional, Union

from sqlalchemy.orm import Session

from sponsor_service import crud
from sponsor_service.core.s3 import ObjectStorage
from sponsor_service.services.errors import (
    InvalidAttachmentError,
    MissingCompanyContextError,
    StorageUploadError,
)

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:image"
EXTENSION_PATTERN = re.compile(r"^data:image/([a-zA-Z]+);base64,")


class LogoResolver:
    """Turns the ``logo`` field of a request into an attachment id."""

    def __init__(self, storage: ObjectStorage):
        self.storage = storage

    def resolve_logo(
        self,
        db: Session,
        logo: Optional[Union[int, str]],
        company_id: Optional[int],
        user_id: int,
    ) -> Optional[int]:
        """
        Returns the attachment id to store, or None when no logo was sent
        (keep the current one on update, none on create).
        """
        if logo is None:
            return None

        if isinstance(logo, str) and logo.startswith(DATA_URL_PREFIX):
            if not company_id:
                raise MissingCompanyContextError()
            return self._upload(db, logo, company_id, user_id)

        if isinstance(logo, int) and not isinstance(logo, bool):
            if crud.attachment.get(db, logo) is None:
                raise InvalidAttachmentError()
            return logo

        raise InvalidAttachmentError()

    def _upload(self, db: Session, base64_image: str, company_id: int, user_id: int) -> int:
        match = EXTENSION_PATTERN.match(base64_image)
        extension = match.group(1).lower() if match else "png"
        key = f"company/{company_id}/{int(time.time() * 1000)}.{extension}"

        result = self.storage.store(base64_image, key)
        if result.error or not result.url:
            raise StorageUploadError(result.error)

        attachment = crud.attachment.create_image(
            db, key=key, cdn_url=result.url, user_id=user_id
        )
        logger.info(f"Created attachment record {attachment.id} for company {company_id}")
        return attachment.id
