"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Ledger document storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    backend: Literal["json", "memory"] = "json"
    data_dir: Path = Path("data")
    ledger_file: str = "ledger.json"

    @property
    def ledger_path(self) -> Path:
        return self.data_dir / self.ledger_file


class ExportSettings(BaseSettings):
    """Text export configuration."""

    model_config = SettingsConfigDict(env_prefix="EXPORT_")

    output_dir: Path = Path("exports")
    shop_name: str = "Shop Ledger"


class PdfSettings(BaseSettings):
    """Print (PDF) rendering configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    company_name: str = "Shop Ledger"
    company_address: str = ""
    company_phone: str = ""
    footer_text: str = "Generated by shopledger"


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "shopledger"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)
    api: APISettings = Field(default_factory=APISettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
