"""Data models for the soundboard."""

from .catalog import DEFAULT_CATALOG, Catalog, Category
from .clip import DELIMITER, Clip
from .config import AppConfig
from .playback import IDLE, PlaybackSnapshot, PlaybackStatus

__all__ = [
    "AppConfig",
    "Catalog",
    "Category",
    "Clip",
    "DEFAULT_CATALOG",
    "DELIMITER",
    "IDLE",
    "PlaybackSnapshot",
    "PlaybackStatus",
]
