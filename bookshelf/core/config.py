"""Application configuration using Pydantic Settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )

    # Application metadata
    app_title: str = "Bookshelf"
    app_description: str = (
        "Book collection manager with tombstone removal and binary persistence"
    )
    app_version: str = "0.1.0"

    # Collection storage
    default_data_file: str = "hw.data"
    data_dir: Path = Path(".")
    atomic_save: bool = True

    # API Configuration
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS Configuration
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = Field(default_factory=lambda: ["*"])

    # Health check
    health_status: str = "ok"
    health_message: str = "Bookshelf service is running"

    # Logging Configuration
    log_level: str = "WARNING"
    log_stream: str = "ext://sys.stderr"
    log_format_general: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_format_request: str = (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s | method=%(method)s path=%(path)s status=%(status_code)s duration_ms=%(duration_ms)s request_id=%(request_id)s"
    )


# Global settings instance
settings = Settings()  # type: ignore[call-arg]
