"""Playback state record.

Runtime state, so a plain dataclass rather than a Pydantic model: it is
never serialized and changes on every position update.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .clip import Clip


class PlaybackStatus(Enum):
    """States of the playback controller."""

    IDLE = "idle"
    PLAYING = "playing"


@dataclass(frozen=True, slots=True)
class PlaybackSnapshot:
    """Immutable view of the single playback slot."""

    active_clip: Optional[Clip] = None
    is_playing: bool = False
    position: float = 0.0          # seconds
    total_duration: float = 0.0    # seconds

    @property
    def status(self) -> PlaybackStatus:
        return PlaybackStatus.PLAYING if self.active_clip is not None else PlaybackStatus.IDLE

    @property
    def progress(self) -> float:
        """Playback progress as fraction (0.0 to 1.0)."""
        if self.total_duration <= 0:
            return 0.0
        return min(self.position / self.total_duration, 1.0)

    def idle(self) -> "PlaybackSnapshot":
        """The "nothing playing" value; the last known duration is kept."""
        return replace(self, active_clip=None, is_playing=False, position=0.0)


IDLE = PlaybackSnapshot()
