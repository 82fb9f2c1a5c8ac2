"""Process settings for the Kill Awards service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Where documents live and how the host environment looks."""

    model_config = SettingsConfigDict(
        env_prefix="KILLAWARDS_", env_file=".env", env_file_encoding="utf-8"
    )

    config_dir: Path = Field(
        default=Path("oxide/config"), description="Directory holding the configuration document"
    )
    data_dir: Path = Field(
        default=Path("oxide/data"), description="Directory holding the kill counter document"
    )
    plugin_name: str = Field(
        default="KillAwards",
        min_length=1,
        description="Name both documents are keyed by",
    )
    plugin_version: str = Field(
        default="1.0.0", description="Running configuration schema version"
    )
    world_size: int = Field(
        default=4500, gt=0, description="Edge length of the square map, used for grid labels"
    )
    gear_provider_enabled: bool = Field(
        default=False,
        description="Whether the host reports a loaded gear-set provider",
    )
    language: str = Field(default="en", description="Language used for player notifications")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.config_dir.mkdir(parents=True, exist_ok=True)
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
