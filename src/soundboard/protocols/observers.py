"""Observer protocol definitions for domain-specific events."""

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from .events import FavoritesEvent, PlaybackEvent

if TYPE_CHECKING:
    from soundboard.models import Clip, PlaybackSnapshot


@runtime_checkable
class PlaybackObserver(Protocol):
    """
    Observer that receives playback state changes.

    Any number of views may observe the controller; they are notified
    synchronously, in subscription order, after each state mutation.
    """

    def on_playback_event(self, event: PlaybackEvent, snapshot: "PlaybackSnapshot") -> None:
        """
        Handle playback state changes.

        Args:
            event: The type of playback event
            snapshot: Playback state after the change

        Threading:
            Called on the asyncio event loop thread.
        """
        ...


@runtime_checkable
class FavoritesObserver(Protocol):
    """Observer that receives favorites list changes."""

    def on_favorites_event(self, event: FavoritesEvent, clip: Optional["Clip"] = None, **kwargs) -> None:
        """
        Handle favorites changes.

        Args:
            event: The type of favorites event
            clip: The clip added or removed (None for LOADED)
            **kwargs: Event-specific data (``error`` for SAVE_FAILED)

        Error Handling:
            Exceptions raised by observers are caught and logged. They do
            not propagate to the caller.
        """
        ...
