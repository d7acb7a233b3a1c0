from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    debug: bool = Field(False, alias="POSTADDRESS_DEBUG")
    database_path: Path = Field(
        Path("./data/addresses.db"), alias="POSTADDRESS_DATABASE_PATH"
    )
    default_order: Literal["address", "insertion"] = Field(
        "address", alias="POSTADDRESS_DEFAULT_ORDER"
    )
    log_format: Literal["console", "json"] | None = Field(
        None, alias="POSTADDRESS_LOG_FORMAT"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("database_path", mode="before")
    def _expand_database_path(cls, value: Path | str) -> Path:
        """Expand user and make sure the database directory exists."""
        path = Path(value).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @field_validator("default_order", "log_format", mode="before")
    def _normalize_choice(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]
