"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each settings group reads its own prefix (LLM_, APP_, LOG_)
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_ENV = os.getenv("APP_ENV", "development")

PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_path = PROJECT_ROOT / ENV_FILE_MAP.get(APP_ENV, ".env.development")

# Nested BaseSettings don't inherit env_file, so populate os.environ up front.
if _env_path.is_file():
    from dotenv import load_dotenv

    load_dotenv(_env_path, override=True)


class LLMSettings(BaseSettings):
    """Remote model configuration.

    The API key is optional here so the settings object can always be built;
    the client factory refuses to start without it.
    """

    provider: str = Field(
        "openai",
        description="LLM provider name (currently only 'openai')",
    )
    model: str = Field(
        "gpt-4o-mini",
        description="Model name used for resume screening",
    )
    api_key: str | None = Field(
        None,
        description="Provider API key (required at startup)",
    )
    base_url: str | None = Field(
        None,
        description="Custom API endpoint for OpenAI-compatible gateways",
    )
    timeout_seconds: float = Field(
        120.0,
        description="Request timeout enforced by the provider SDK",
    )
    temperature: float = Field(
        0.2,
        ge=0.0,
        le=2.0,
        description="Decoding temperature; kept low to favour determinism",
    )

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        case_sensitive=False,
    )


class AppSettings(BaseSettings):
    """Screening workflow configuration."""

    debug: bool = Field(
        False,
        description="Enable debug mode with verbose logging",
    )
    max_resumes: int = Field(
        10,
        ge=1,
        description="Maximum number of resumes held in one analysis batch",
    )
    allowed_extensions: str = Field(
        ".pdf,.doc,.docx,.txt",
        description="Comma-separated file extension hint for resume uploads",
    )
    max_docx_paragraphs: int = Field(
        2000,
        ge=1,
        description="Maximum paragraphs converted from a DOCX resume",
    )
    in_flight_guard_enabled: bool = Field(
        True,
        description="Reject a second analysis from a client while one is running",
    )
    client_id_header: str = Field(
        "X-Client-ID",
        description="Header identifying the browser session for the in-flight guard",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
    )

    @property
    def allowed_extension_set(self) -> set[str]:
        return {
            ext.strip().lower()
            for ext in self.allowed_extensions.split(",")
            if ext.strip()
        }


class LogSettings(BaseSettings):
    """Logging output configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="'json' or 'plain'")
    output: str = Field("stdout", description="'stdout' or 'file'")
    file_path: str | None = Field(None, description="Log file path when output=file")
    max_bytes: int = Field(0, ge=0, description="Rotate after this many bytes (0 disables)")
    backup_count: int = Field(3, ge=0, description="Rotated files to keep")
    request_id_header: str = Field(
        "X-Request-ID",
        description="Header used to accept/propagate the correlation id",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main application settings container."""

    app_env: str = APP_ENV
    llm: LLMSettings = Field(default_factory=LLMSettings)
    app: AppSettings = Field(default_factory=AppSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


settings = Settings()
