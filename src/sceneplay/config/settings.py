"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested values use a double underscore, e.g. ``SCENEPLAY_REVEAL__CHUNK_SIZE``.
"""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RevealSettings(BaseModel):
    """Typewriter reveal settings."""

    # Characters revealed per host tick
    chunk_size: int = Field(default=1, ge=1)


class PlaybackSettings(BaseModel):
    """Headless playback clock settings."""

    fps: int = Field(default=10, ge=1)
    speed: float = Field(default=1.0, gt=0.0)
    loop: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SCENEPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    preset: str = "module2"

    # Seed for stable highlight samples (one sample per session)
    sample_seed: int = 0

    # Nested settings
    reveal: RevealSettings = Field(default_factory=RevealSettings)
    playback: PlaybackSettings = Field(default_factory=PlaybackSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
