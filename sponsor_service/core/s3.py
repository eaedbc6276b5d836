# sponsor_service/core/s3.py
import base64
import binascii
import logging
import re
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sponsor_service.core.config import settings

logger = logging.getLogger(__name__)

DATA_URL_PATTERN = re.compile(r"^data:image/([a-zA-Z+]+);base64,(.+)$", re.DOTALL)
ALLOWED_IMAGE_TYPES = {"jpg", "jpeg", "png", "gif", "webp"}
CACHE_CONTROL = "max-age=315360000"


def get_s3_client():
    """
    Initializes and returns an S3 client.
    Conditionally configures the endpoint_url for local development with MinIO.
    """
    # If the endpoint URL is set in the environment (for MinIO), use it.
    if settings.AWS_S3_ENDPOINT_URL:
        return boto3.client(
            "s3",
            endpoint_url=settings.AWS_S3_ENDPOINT_URL,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_S3_REGION,
        )
    # Otherwise, it will default to the standard AWS endpoint for production.
    else:
        return boto3.client(
            "s3",
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_S3_REGION,
        )


@dataclass
class StorageResult:
    url: Optional[str] = None
    error: Optional[str] = None


class ObjectStorage:
    """Stores base64 data-URL images in the configured bucket."""

    def __init__(self, client=None, bucket: str | None = None, base_url: str | None = None):
        self._client = client
        self.bucket = bucket or settings.AWS_S3_BUCKET_NAME
        self.base_url = base_url or settings.OBJECT_BASE_URL

    @property
    def client(self):
        if self._client is None:
            self._client = get_s3_client()
        return self._client

    def store(self, base64_image: str, key: str) -> StorageResult:
        """
        Decode a ``data:image/<type>;base64,...`` string and upload it under
        ``key``. Never raises; failures come back in ``StorageResult.error``.
        """
        match = DATA_URL_PATTERN.match(base64_image)
        if not match:
            return StorageResult(error="Invalid base64 image format")

        image_type = match.group(1).lower()
        if image_type not in ALLOWED_IMAGE_TYPES:
            return StorageResult(error=f"Unsupported image type: {image_type}")

        try:
            body = base64.b64decode(match.group(2), validate=True)
        except (binascii.Error, ValueError) as e:
            return StorageResult(error=f"Invalid base64 payload: {e}")

        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=f"image/{'jpeg' if image_type == 'jpg' else image_type}",
                CacheControl=CACHE_CONTROL,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to upload {key} to bucket {self.bucket}: {e}")
            return StorageResult(error=str(e))

        url = f"{self.base_url}/{key}"
        logger.info(f"Uploaded {len(body)} bytes to {url}")
        return StorageResult(url=url)


def get_object_storage() -> ObjectStorage:
    """FastAPI dependency for the object storage collaborator."""
    return ObjectStorage()
