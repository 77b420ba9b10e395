"""
Application settings for neo-blog.

Values come from the environment or a local ``.env`` file.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError

DEVELOPMENT_JWT_SECRET = "change-me-in-production-use-strong-secret-key"


class BlogSettings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="neo-blog")
    app_version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Persistence
    storage_backend: Literal["memory", "postgres"] = Field(default="memory")
    database_url: Optional[str] = Field(default=None)
    db_pool_min_size: int = Field(default=1, ge=1)
    db_pool_max_size: int = Field(default=10, ge=1)
    db_command_timeout: int = Field(default=60)

    # Security Configuration
    jwt_secret: SecretStr = Field(default=SecretStr(DEVELOPMENT_JWT_SECRET))
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_time: int = Field(default=3600, gt=0)  # seconds
    bcrypt_salt_rounds: int = Field(default=10)

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="simple")

    # Pagination Configuration
    default_page_size: int = Field(default=10, gt=0)
    max_page_size: int = Field(default=100, gt=0)

    @field_validator("bcrypt_salt_rounds")
    @classmethod
    def validate_salt_rounds(cls, v: int) -> int:
        if v < 4:
            raise ValueError("bcrypt_salt_rounds must be at least 4")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    def validate_for_runtime(self) -> None:
        """Reject settings that are only acceptable in development.

        Raises:
            ConfigurationError: on an unsafe or incomplete configuration
        """
        if self.is_production and self.jwt_secret.get_secret_value() == DEVELOPMENT_JWT_SECRET:
            raise ConfigurationError("JWT_SECRET must be set in production")
        if self.storage_backend == "postgres" and not self.database_url:
            raise ConfigurationError("DATABASE_URL is required when STORAGE_BACKEND=postgres")


@lru_cache()
def get_settings() -> BlogSettings:
    """Get cached settings instance."""
    return BlogSettings()
