# sponsor_service/api/v1/endpoints/health.py
"""
Health check endpoints for monitoring system status.
"""
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sponsor_service.core.s3 import ObjectStorage, get_object_storage
from sponsor_service.db.session import get_db

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_check():
    """Basic health check - API is responding."""
    return {"status": "healthy", "service": "sponsor-service"}


@router.get("/db")
def database_health(db: Session = Depends(get_db)):
    """Check database connectivity."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise HTTPException(status_code=503, detail=f"Database unhealthy: {e}")
    return {"status": "healthy", "component": "database"}


@router.get("/storage")
def storage_health(storage: ObjectStorage = Depends(get_object_storage)):
    """Check that the logo bucket is reachable."""
    try:
        storage.client.head_bucket(Bucket=storage.bucket)
    except (ClientError, BotoCoreError) as e:
        raise HTTPException(status_code=503, detail=f"Storage unhealthy: {e}")
    return {"status": "healthy", "component": "storage", "bucket": storage.bucket}
