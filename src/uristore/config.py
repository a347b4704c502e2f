"""Runtime settings for uristore, read from ``URISTORE_*`` environment variables."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library-wide defaults."""

    model_config = SettingsConfigDict(
        env_prefix="URISTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_scheme: str = Field(default="mem", min_length=1)
    copy_chunk_size: int = Field(
        default=32 * 1024,
        gt=0,
        description="Bytes moved per read/write cycle by generic_copy.",
    )
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"


# Global settings instance
settings = Settings()
