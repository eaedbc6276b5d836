# sponsor_service/api/v1/api.py

from fastapi import APIRouter
from sponsor_service.api.v1.endpoints import health, sponsors

# This is the main router for the v1 API.
# It includes all the specific endpoint routers.
api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(sponsors.router)
