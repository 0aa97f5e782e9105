"""Application settings and configuration.

This module defines all configuration options for the Curtain Call application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Curtain Call", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./curtain_call.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Redis backs single-use form tokens; an in-process store is used when unset
    redis_url: str | None = Field(default=None, alias="REDIS_URL")

    # Session tokens
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 14,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    session_cookie_name: str = Field(default="access_token", alias="SESSION_COOKIE_NAME")

    # Anti-forgery tokens issued with each form
    csrf_token_ttl_seconds: int = Field(default=60 * 60, alias="CSRF_TOKEN_TTL_SECONDS")
    csrf_max_tokens: int = Field(default=10, alias="CSRF_MAX_TOKENS")

    # Post contents
    post_contents_max_length: int = Field(default=200, alias="POST_CONTENTS_MAX_LENGTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url


settings = Settings()  # type: ignore[call-arg]
