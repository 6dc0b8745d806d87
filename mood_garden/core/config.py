"""
Application configuration using pydantic-settings.
"""
import logging
from typing import Annotated, List, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from mood_garden import __version__
from mood_garden.core.time_utils import validate_timezone

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_URL = "sqlite:///./mood_garden.db"
DEFAULT_PORT = 5000


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Mood Garden API"
    app_version: str = __version__
    debug: bool = False
    environment: str = "development"

    # API
    api_prefix: str = "/api"
    enable_cors: bool = True
    cors_origins: Annotated[List[str], NoDecode] = ["*"]

    # Database
    database_url: str = DEFAULT_SQLITE_URL
    db_connect_timeout: int = Field(default=5, description="Seconds to wait for the database at startup")

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    # Streaks are counted in calendar days of this zone; unset means the server's local zone
    streak_timezone: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def database_type(self) -> str:
        """Detect database type from the configured URL."""
        if self.database_url.startswith(("postgresql", "postgres")):
            return "postgresql"
        if self.database_url.startswith("sqlite"):
            return "sqlite"
        return self.database_url.split("://", 1)[0]

    @field_validator('database_url')
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Fall back to the local SQLite file when DATABASE_URL is blank."""
        if not v or not v.strip():
            logger.info(
                "DATABASE_URL not provided; defaulting to SQLite at %s", DEFAULT_SQLITE_URL
            )
            return DEFAULT_SQLITE_URL
        return v.strip()

    @field_validator('db_connect_timeout')
    @classmethod
    def validate_connect_timeout(cls, v: int) -> int:
        if v < 1 or v > 60:
            raise ValueError("DB_CONNECT_TIMEOUT must be between 1 and 60 seconds")
        return v

    @field_validator('port')
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {v}")
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if v is None:
            return ["*"]

        if isinstance(v, str):
            if not v.strip():
                return ["*"]
            # Handle comma-separated string from env
            return [origin.strip() for origin in v.split(',') if origin.strip()]

        if isinstance(v, list):
            return v

        return ["*"]

    @field_validator('cors_origins')
    @classmethod
    def validate_cors_origins(cls, v: List[str], info: ValidationInfo) -> List[str]:
        """Flag wildcard origins in production."""
        v = v or ["*"]
        if info.data.get('environment') == 'production' and '*' in v:
            logger.error(
                "Wildcard (*) CORS origin used in production! "
                "Set CORS_ORIGINS to your frontend domain(s)."
            )
        return v

    @field_validator('streak_timezone')
    @classmethod
    def validate_streak_timezone(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not validate_timezone(v):
            raise ValueError(
                f'Invalid STREAK_TIMEZONE: "{v}". Must be a valid IANA timezone name (e.g., "Europe/Berlin").'
            )
        return v


# Create settings instance
settings = Settings()
