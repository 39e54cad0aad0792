import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Hawk Cards API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Persistence: "database" keeps collections in SQL, "memory" for the process lifetime
    storage_backend: Literal["database", "memory"] = "database"
    database_url: str = "sqlite:///./hawk_cards.db"
    database_echo: bool = False

    # Sharing
    public_base_url: str = "http://localhost:3000"
    organization_name: str = "Hawkforce AI"

    # Gemini (audit log analysis)
    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-3-flash-preview"
    gemini_timeout_seconds: float = 60.0
    log_analysis_limit: int = 20

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # collection reads / writes
    log_level_gemini: str = "INFO"           # Gemini client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def model_post_init(self, __context: object) -> None:
        """Warn about settings that disable a feature rather than fail startup."""
        if not self.gemini_api_key.strip():
            _config_logger.debug("GEMINI_API_KEY is not set; log analysis will be unavailable")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
