"""TUI widgets."""

from .now_playing import NowPlaying
from .sound_button import SoundButton
from .sound_grid import SoundGrid

__all__ = ["NowPlaying", "SoundButton", "SoundGrid"]
