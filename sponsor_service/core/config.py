# sponsor_service/core/config.py

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from the environment provided by Docker Compose.
    model_config = SettingsConfigDict(extra="ignore")

    # The environment mode: 'local' or 'prod'
    ENV: str

    # --- Production URLs (for inside Docker) ---
    DATABASE_URL_PROD: str
    KAFKA_BOOTSTRAP_SERVERS_PROD: str

    # --- Local Development URLs (for running locally) ---
    DATABASE_URL_LOCAL: str
    KAFKA_BOOTSTRAP_SERVERS_LOCAL: str

    # Other secrets
    JWT_SECRET: str
    AWS_ACCESS_KEY_ID: str
    AWS_SECRET_ACCESS_KEY: str
    AWS_S3_BUCKET_NAME: str
    AWS_S3_REGION: str
    AWS_S3_ENDPOINT_URL: Optional[str] = None  # MinIO in local development

    # Public base URL that serves uploaded objects (e.g. a CDN in front of the bucket)
    CDN_BASE_URL: Optional[str] = None

    # Downstream "recompute relevance" signal
    SPONSOR_STRENGTH_TOPIC: str = "event.strength.v1"
    KAFKA_REQUEST_TIMEOUT_MS: int = 5000

    # --- Dynamic Properties ---
    # These properties return the correct URL based on the ENV
    @property
    def DATABASE_URL(self) -> str:
        return (
            self.DATABASE_URL_LOCAL if self.ENV == "local" else self.DATABASE_URL_PROD
        )

    @property
    def KAFKA_BOOTSTRAP_SERVERS(self) -> str:
        return (
            self.KAFKA_BOOTSTRAP_SERVERS_LOCAL
            if self.ENV == "local"
            else self.KAFKA_BOOTSTRAP_SERVERS_PROD
        )

    @property
    def OBJECT_BASE_URL(self) -> str:
        if self.CDN_BASE_URL:
            return self.CDN_BASE_URL.rstrip("/")
        return f"https://{self.AWS_S3_BUCKET_NAME}.s3.amazonaws.com"


# Create a single instance of the settings
settings = Settings()
