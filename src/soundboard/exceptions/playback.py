"""Asset and playback exceptions.

This module defines exceptions raised while resolving and playing clips:
- AssetNotFoundError: The clip's audio file is missing
- PlaybackError: Base class for failed playback requests
- PlaybackBackendError: The audio subsystem rejected playback
- PlaybackTimeoutError: A backend call did not finish in time
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .base import SoundboardError

if TYPE_CHECKING:
    from soundboard.models import Clip


class PlaybackError(SoundboardError):
    """A playback request could not be fulfilled."""

    def __init__(self, user_message: str, clip: Optional["Clip"] = None, **kwargs):
        """
        Initialize playback error.

        Args:
            user_message: User-friendly error message
            clip: The clip that failed to play (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.clip = clip


class AssetNotFoundError(PlaybackError):
    """Requested clip's audio file is missing."""

    def __init__(self, clip: "Clip", path: Path):
        """
        Initialize asset-not-found error.

        Args:
            clip: The clip whose asset is missing
            path: Where the asset was expected
        """
        super().__init__(
            user_message=f"Sound '{clip.display_name}' is not available.",
            technical_message=f"Asset not found for {clip.key}: {path}",
            clip=clip,
            recoverable=False,
            recovery_hint=(
                f"Expected audio file at {path}\n"
                "Run 'soundboard check' to list all missing sounds."
            ),
        )
        self.path = path


class PlaybackBackendError(PlaybackError):
    """The audio backend rejected or failed a playback request."""

    def __init__(
        self,
        user_message: str = "Audio playback failed.",
        clip: Optional["Clip"] = None,
        original_error: Optional[str] = None,
        device_id: Optional[int] = None,
    ):
        """
        Initialize backend error.

        Args:
            user_message: User-friendly error message
            clip: The clip being played (if applicable)
            original_error: Error message from the audio library
            device_id: Audio device involved (if known)
        """
        tech_msg = user_message
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_message,
            technical_message=tech_msg,
            clip=clip,
            recovery_hint=(
                "Check that an audio output device is available. "
                "Run 'soundboard audio list' to see available devices."
            ),
        )
        self.device_id = device_id


class PlaybackTimeoutError(PlaybackError):
    """A call into the audio backend did not complete in time."""

    def __init__(self, operation: str, timeout: float, clip: Optional["Clip"] = None):
        """
        Initialize timeout error.

        Args:
            operation: Backend operation that timed out (e.g. "play")
            timeout: Timeout in seconds
            clip: The clip involved (if applicable)
        """
        super().__init__(
            user_message="Audio device did not respond in time.",
            technical_message=f"Backend '{operation}' timed out after {timeout:.1f}s",
            clip=clip,
            recovery_hint="Increase 'backend_timeout' with 'soundboard config set'.",
        )
        self.operation = operation
        self.timeout = timeout
