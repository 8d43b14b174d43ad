"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic_settings import BaseSettings


class StorageBackend(str, Enum):
    """Favorites storage backend type."""
    SQLITE = "sqlite"
    MEMORY = "memory"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class AppConfig(BaseSettings):
    """Configuration for the ghfollowers client."""

    # API settings
    api_base_url: str = "https://api.github.com"
    request_timeout_seconds: float = 30.0
    user_agent: str = "ghfollowers"
    github_token: str | None = None

    # Favorites storage
    storage_backend: StorageBackend = StorageBackend.SQLITE
    sqlite_path: str = ".ghfollowers.db"

    # Image cache bounds
    image_cache_max_entries: int = 500
    image_cache_max_bytes: int = 50 * 1024 * 1024

    # Follower list
    prefetch_distance: int = 10

    # Logging
    log_level: str = "WARNING"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "GHFOLLOWERS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
