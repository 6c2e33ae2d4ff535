"""Generic utility modules for soundboard."""

from .formatting import format_clip_name, format_duration

__all__ = ["format_clip_name", "format_duration"]
