# sponsor_service/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sponsor_service.api.v1.api import api_router

logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Sponsor service starting up...")
    yield
    logger.info("Sponsor service shutting down...")


app = FastAPI(
    title="Sponsor Service",
    version="1.0.0",
    description="""
        **Event Sponsor Management Service**

        Maintains the ordered sponsor list of every event edition.

        ## Features

        * **Sponsor upsert**: create, update, move and soft-delete sponsors
        * **Ordering**: inserting at a position shifts the sponsors after it
        * **Logos**: base64 images are stored in S3 as attachments
        * **Audit trail**: every change writes a linked pre/post review pair
        * **Downstream signal**: edition changes are published to Kafka

        ## Authentication

        Endpoints require a JWT via the `Authorization: Bearer <token>` header.
        The caller must be a point of contact of the event.
        """,
    lifespan=lifespan,
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {"status": "Sponsor Service is running"}
