"""Configuration management for Workboard."""

import re
from typing import List, Literal

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "dev-secret-key-not-for-production"

_DURATION_PATTERN = re.compile(r"^(\d+)\s*([smhd]?)$")
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str) -> int:
    """
    Convert a duration string into seconds.

    Accepts bare seconds ("3600") or a number followed by one of
    s, m, h, d ("30m", "24h", "7d").

    Raises:
        ValueError: If the string is not a recognised duration
    """
    match = _DURATION_PATTERN.match(str(value).strip().lower())
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return int(amount) * _DURATION_UNITS[unit]


class DatabaseConfig(BaseSettings):
    """Database configuration."""

    path: str = Field(
        default="data/workboard.db",
        description="Path to SQLite database (':memory:' for an in-memory store)",
    )
    echo: bool = Field(
        default=False,
        description="Log every SQL statement",
    )

    model_config = {"env_prefix": "DB_", "extra": "ignore"}


class AuthConfig(BaseSettings):
    """Token and password hashing configuration."""

    jwt_secret: SecretStr = Field(
        default=SecretStr(DEFAULT_JWT_SECRET),
        description="Secret used to sign access tokens",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    jwt_expires_in: str = Field(
        default="24h",
        description="Access token lifetime (e.g. 30m, 24h, 7d)",
    )
    bcrypt_rounds: int = Field(
        default=12,
        ge=4,
        le=15,
        description="bcrypt cost factor",
    )

    model_config = {"env_prefix": "", "extra": "ignore"}

    @field_validator("jwt_expires_in")
    @classmethod
    def _check_expires_in(cls, value: str) -> str:
        parse_duration(value)
        return value

    @property
    def expires_in_seconds(self) -> int:
        return parse_duration(self.jwt_expires_in)


class ServerConfig(BaseSettings):
    """HTTP server configuration."""

    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server",
    )
    enable_cors: bool = Field(
        default=True,
        description="Enable CORS middleware",
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    model_config = {"env_prefix": "SERVER_", "extra": "ignore"}


class RateLimitConfig(BaseSettings):
    """Per-client request limits for the API."""

    enabled: bool = Field(
        default=True,
        description="Limit requests per client (never applied in the test environment)",
    )
    window: str = Field(
        default="15m",
        description="Length of the counting window (e.g. 60s, 15m, 1h)",
    )
    max_requests: int = Field(
        default=100,
        ge=1,
        description="Requests a client may make per window",
    )

    model_config = {"env_prefix": "RATE_LIMIT_", "extra": "ignore"}

    @field_validator("window")
    @classmethod
    def _check_window(cls, value: str) -> str:
        if parse_duration(value) < 1:
            raise ValueError("RATE_LIMIT_WINDOW must be at least one second")
        return value

    @property
    def window_seconds(self) -> int:
        return parse_duration(self.window)

    @property
    def limit_string(self) -> str:
        """The limit in the notation the limiter parses, e.g. "100 per 900 second"."""
        return f"{self.max_requests} per {self.window_seconds} second"


class Settings(BaseSettings):
    """Main settings combining all configurations."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)

    environment: Literal["development", "test", "production"] = Field(
        default="development",
        alias="APP_ENV",
        description="Deployment environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }

    @property
    def rate_limit_active(self) -> bool:
        return self.rate_limit.enabled and self.environment != "test"

    @model_validator(mode="after")
    def _check_production_secret(self) -> "Settings":
        if self.environment == "production":
            secret = self.auth.jwt_secret.get_secret_value()
            if secret == DEFAULT_JWT_SECRET:
                raise ValueError("JWT_SECRET must be set in production environment")
            if len(secret) < 32:
                raise ValueError("JWT_SECRET must be at least 32 characters long in production")
        return self

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment and files."""
        from dotenv import load_dotenv
        load_dotenv()
        return cls()


# Global settings instance
settings = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global settings
    if settings is None:
        settings = Settings.load()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings.load()
    return settings
