"""Application settings loaded from the environment (and .env)."""
from functools import lru_cache
from typing import Annotated

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.constants import IMAGES_BUCKET

load_dotenv()


class Settings(BaseSettings):
    """Runtime configuration for the CMS API."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./cms.db", validation_alias="DATABASE_URL")
    database_echo: bool = Field(default=False, validation_alias="DATABASE_ECHO")

    # Redis (admin sessions)
    redis_url: str = Field(default="redis://localhost:6379", validation_alias="REDIS_URL")
    session_ttl_seconds: int = Field(default=86400, validation_alias="SESSION_TTL_SECONDS")

    # S3-compatible image storage
    storage_endpoint_url: str | None = Field(default=None, validation_alias="STORAGE_ENDPOINT_URL")
    storage_region: str = Field(default="us-east-1", validation_alias="STORAGE_REGION")
    storage_access_key: str | None = Field(default=None, validation_alias="STORAGE_ACCESS_KEY")
    storage_secret_key: str | None = Field(default=None, validation_alias="STORAGE_SECRET_KEY")
    storage_bucket: str = Field(default=IMAGES_BUCKET, validation_alias="STORAGE_BUCKET")
    storage_public_url: str = Field(default="http://localhost:9000", validation_alias="STORAGE_PUBLIC_URL")

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_origins(cls, v):
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        return [part.strip() for part in str(v).split(",") if part.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
