from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below

    DYNAMODB_TABLE_NAME and DOMAIN_NAME have no default: constructing
    Settings without them raises pydantic.ValidationError, and the
    service refuses to start.
    """

    # Storage (required)
    dynamodb_table_name: str
    aws_region: str = "us-east-1"
    dynamodb_endpoint_url: Optional[str] = None  # e.g. http://localhost:8000 for DynamoDB Local

    # Storage backend: "dynamodb" or "memory"
    store_backend: str = "dynamodb"

    # Public short URLs (domain is required)
    domain_name: str
    short_url_scheme: str = "http"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    idle_timeout: int = 120  # Keep-alive seconds

    # Logging
    log_level: str = "INFO"

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def load_settings() -> Settings:
    """
    Read settings once per process.

    Raises:
        pydantic.ValidationError: if a required variable is missing
    """
    return Settings()
