"""Textual terminal UI."""

from .app import SoundboardTUI

__all__ = ["SoundboardTUI"]
