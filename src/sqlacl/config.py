"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="SQLACL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Hierarchy bootstrap
    server_name: str = Field(default="SQLSERVER", description="Id of the root server securable")
    server_owner: str = Field(
        default="sa",
        description="Principal created at startup that owns the server",
    )
    catalog_path: str | None = Field(
        default=None,
        description="Optional JSON schema catalog loaded at startup",
    )

    # Audit
    audit_logger_name: str = Field(
        default="sqlacl.audit",
        description="Logger receiving permission change events",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
