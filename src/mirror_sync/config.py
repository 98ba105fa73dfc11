"""Configuration management for mirror-sync."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WORKERS = 10
# Size of the intermediate buffer used when streaming file contents
BUFFER_SIZE = 128_000


class SyncConfig(BaseSettings):
    """Configuration for a mirror-sync run."""

    workers: int = Field(
        default=DEFAULT_WORKERS,
        ge=1,
        description="Number of concurrent workers per pipeline",
    )
    buffer_size: int = Field(
        default=BUFFER_SIZE,
        ge=1,
        description="Bytes read per chunk when copying a file",
    )
    log_level: str = Field(default="INFO", description="Minimum level written to stderr")
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional file that receives debug level logs",
    )

    model_config = SettingsConfigDict(
        env_prefix="MIRROR_SYNC_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


# Load default config
config = SyncConfig()
