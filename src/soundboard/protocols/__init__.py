"""Protocol definitions for observer patterns and external capabilities.

- Events: playback and favorites events
- Observers: protocols for components that react to these events
- Capabilities: audio backend, preference store, share target, clip player
"""

from .capabilities import AudioBackend, BackendListener, ClipPlayer, PreferenceStore, ShareTarget
from .events import FavoritesEvent, PlaybackEvent
from .observers import FavoritesObserver, PlaybackObserver

__all__ = [
    # Capabilities
    "AudioBackend",
    "BackendListener",
    "ClipPlayer",
    # Events
    "FavoritesEvent",
    # Observers
    "FavoritesObserver",
    "PlaybackEvent",
    "PlaybackObserver",
    "PreferenceStore",
    "ShareTarget",
]
