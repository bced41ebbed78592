"""Application settings and configuration.

This module defines all configuration options for the Pothole Watch service.
Settings are loaded from environment variables with sensible defaults. The
session signing secret has no default: the application refuses to start
without it.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Pothole Watch", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Session cookie signing
    session_secret: str = Field(alias="SESSION_SECRET")
    session_cookie_name: str = Field(default="session", alias="SESSION_COOKIE_NAME")
    session_ttl_seconds: int = Field(default=60 * 60 * 24 * 7, alias="SESSION_TTL_SECONDS")

    # Anonymous voter identity cookie
    voter_cookie_name: str = Field(default="voter_id", alias="VOTER_COOKIE_NAME")
    voter_cookie_max_age_seconds: int = Field(
        default=60 * 60 * 24 * 365,
        alias="VOTER_COOKIE_MAX_AGE_SECONDS",
    )

    # JSON array of {"username", "password", "role"?, "displayName"?} objects
    bootstrap_users_json: str | None = Field(default=None, alias="BOOTSTRAP_USERS_JSON")

    # Database configuration
    database_url: str = Field(default="sqlite:///./pothole_watch.db", alias="DATABASE_URL")
    database_timeout_seconds: float = Field(default=10.0, alias="DATABASE_TIMEOUT_SECONDS")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Default department for reports submitted without one
    default_department: str = Field(default="Department of Roads", alias="DEFAULT_DEPARTMENT")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("session_secret")
    @classmethod
    def validate_session_secret(cls, v: str) -> str:
        """Reject blank secrets so tokens are never signed with an empty key."""
        if not v or not v.strip():
            raise ValueError("SESSION_SECRET must not be empty")
        return v

    @property
    def is_production(self) -> bool:
        """Return True when running with production hardening enabled."""
        return self.environment.strip().lower() == "production"

    @property
    def secure_cookies(self) -> bool:
        """Cookies carry the Secure flag only in production."""
        return self.is_production


settings = Settings()  # type: ignore[call-arg]
