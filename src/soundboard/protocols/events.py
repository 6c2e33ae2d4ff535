"""Domain events for observer pattern.

- Playback events: changes of the single playback slot
- Favorites events: changes of the persisted favorites list
"""

from enum import Enum


class PlaybackEvent(Enum):
    """Events from the playback controller."""

    STARTED = "started"                      # A clip started playing
    STOPPED = "stopped"                      # Playback stopped by the user
    COMPLETED = "completed"                  # Clip played to the end
    FAILED = "failed"                        # play() failed, controller is idle again
    POSITION_CHANGED = "position_changed"    # Position advanced or seek applied
    DURATION_CHANGED = "duration_changed"    # Backend reported the clip duration


class FavoritesEvent(Enum):
    """Events from the favorites service."""

    LOADED = "loaded"              # Favorites read from the preference store
    ADDED = "added"                # Clip added to favorites
    REMOVED = "removed"            # Clip removed (also sent if it was absent)
    SAVE_FAILED = "save_failed"    # Change could not be persisted
