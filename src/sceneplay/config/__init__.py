"""Configuration for sceneplay."""

from .settings import PlaybackSettings, RevealSettings, Settings, get_settings

__all__ = ["PlaybackSettings", "RevealSettings", "Settings", "get_settings"]
