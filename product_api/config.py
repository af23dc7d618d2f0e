"""
Product Management API — Application Configuration
====================================================

What:  Typed settings loaded from environment variables (and `.env`).
Why:   One explicit configuration object is built at startup and handed to
       the persistence-client factory and the application factory, instead
       of module-level connection globals.
How:   pydantic-settings reads the environment, coerces types and validates
       ranges; derived values (Mongo URI, CORS list) are exposed as properties.
Who:   `create_app()` and `create_mongo_client()` receive an instance.
When:  Constructed once per process (or once per test with overrides).
"""

from typing import List
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Defaults target a local development setup. Production deployments MUST
    set JWT_SECRET and the MONGO_* values.
    """

    # ── Environment ───────────────────────────────────────────────────────
    # Valid: development, qa, production
    environment: str = Field(default="development")

    # ── MongoDB ───────────────────────────────────────────────────────────
    # Connection string: {scheme}://{user}:{password}@{url}/{collection}
    # Atlas clusters use mongodb+srv; a local mongod uses plain mongodb
    mongo_scheme: str = Field(default="mongodb+srv")
    mongo_user: str = Field(default="")
    mongo_password: str = Field(default="")
    mongo_url: str = Field(default="localhost", description="Host (and optional port)")
    # Path segment of the URI, i.e. the database the collections live in
    mongo_collection: str = Field(default="product-management")
    # Reported to the cluster as the client appName
    mongo_db: str = Field(default="product-management")

    # Startup connectivity check (tenacity). Request handlers never retry.
    connect_max_attempts: int = Field(default=3, ge=1, le=10)
    connect_min_wait: int = Field(default=1, ge=0, le=30)
    connect_max_wait: int = Field(default=5, ge=1, le=120)

    # ── Server ────────────────────────────────────────────────────────────
    server_host: str = Field(default="localhost")
    server_port: int = Field(default=3000, ge=1, le=65535)
    api_prefix: str = Field(default="", description="Prefix for resource routes, e.g. /api")

    # ── JWT ───────────────────────────────────────────────────────────────
    # Shared HMAC secret; an empty secret rejects every token
    jwt_secret: str = Field(default="")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expires_minutes: int = Field(default=60, ge=1, le=60 * 24 * 30)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins; "*" reflects any caller
    cors_origins: str = Field(default="*")

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid = {"development", "qa", "production"}
        lower = v.lower()
        if lower not in valid:
            raise ValueError(f"Invalid environment '{v}'. Must be one of: {valid}")
        return lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    # ── Derived values ────────────────────────────────────────────────────

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_qa(self) -> bool:
        return self.environment == "qa"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def mongo_connection(self) -> str:
        """
        Assembles the MongoDB connection URI.

        User and password are URL-escaped so secrets containing '@' or ':'
        survive. Credentials are omitted entirely when no user is configured
        (typical for a local, unauthenticated mongod).
        """
        credentials = ""
        if self.mongo_user:
            credentials = f"{quote_plus(self.mongo_user)}:{quote_plus(self.mongo_password)}@"
        return f"{self.mongo_scheme}://{credentials}{self.mongo_url}/{self.mongo_collection}"

    @property
    def mongo_options(self) -> dict:
        """Client options passed alongside the URI."""
        return {
            "retryWrites": True,
            "w": "majority",
            "appName": self.mongo_db,
            "tz_aware": True,
        }

    def validate_required_for_production(self) -> None:
        """
        Checks that security-critical settings are configured.

        Raises:
            ValueError listing every missing setting.
        """
        errors = []
        if not self.jwt_secret:
            errors.append("JWT_SECRET is not set. Protected routes will reject every token.")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )
