"""
Configuration management for neo-docstore.

Settings are loaded from environment variables (or a local ``.env`` file) and
are only read when stores, repositories and paginators are composed.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocstoreSettings(BaseSettings):
    """Settings for the document store and the pagination engine."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="neo-docstore")
    environment: str = Field(default="development")

    # Firestore Configuration
    firestore_project_id: Optional[str] = Field(default=None)
    firestore_database: str = Field(default="(default)")
    firestore_emulator_host: Optional[str] = Field(default=None)
    google_application_credentials: Optional[str] = Field(default=None)

    # Pagination Configuration
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    # Repository policy
    soft_delete_enabled: bool = Field(default=True)

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def uses_emulator(self) -> bool:
        """Check if the Firestore emulator is configured."""
        return bool(self.firestore_emulator_host)


@lru_cache()
def get_settings() -> DocstoreSettings:
    """Get cached settings instance."""
    return DocstoreSettings()
