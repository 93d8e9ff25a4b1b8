import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Client Browser"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Label stamped into updated_by when the add-client form leaves it blank
    default_actor: str = "current user"

    # Load the demo clients (ids 20-24) into a fresh store
    seed_sample_data: bool = True

    # Memoized views kept per store version; 0 disables the cache
    view_cache_size: int = 128

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_store: str = "INFO"            # Record store appends
    log_level_view: str = "WARNING"          # Filter / sort / view service

    model_config = {
        "env_prefix": "CLIENT_BROWSER_",
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.view_cache_size < 0:
            _config_logger.warning(
                "view_cache_size=%d is negative; view caching disabled", self.view_cache_size
            )
            object.__setattr__(self, "view_cache_size", 0)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
