"""Soundboard: a catalog of short sound clips with favorites and sharing."""

__version__ = "0.1.0"

from .app import SoundboardApp
from .models import DEFAULT_CATALOG, AppConfig, Catalog, Clip

__all__ = [
    "AppConfig",
    "Catalog",
    "Clip",
    "DEFAULT_CATALOG",
    "SoundboardApp",
]
