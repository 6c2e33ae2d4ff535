"""CLI commands for soundboard."""

from .audio import audio_group
from .catalog import check, list_sounds, play, share
from .config import config
from .favorites import favorites_group

__all__ = ["audio_group", "check", "config", "favorites_group", "list_sounds", "play", "share"]
