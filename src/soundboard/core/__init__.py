"""Core playback logic."""

from .playback_controller import PlaybackController

__all__ = ["PlaybackController"]
