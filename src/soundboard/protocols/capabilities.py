"""Narrow interfaces to the external collaborators of the soundboard.

The core only talks to platform services through these protocols:
audio output, the key-value preference store and the share mechanism.
Views receive a ClipPlayer instead of a bare callback.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from soundboard.audio.data import AudioData


@runtime_checkable
class BackendListener(Protocol):
    """
    Receives asynchronous notifications from an audio backend.

    Every notification carries the session number passed to
    ``AudioBackend.play`` so late events of a replaced session can be
    told apart and dropped.
    """

    def on_duration_changed(self, session: int, duration: float) -> None: ...

    def on_position_changed(self, session: int, position: float) -> None: ...

    def on_complete(self, session: int) -> None: ...


@runtime_checkable
class AudioBackend(Protocol):
    """
    Single-slot audio output.

    Notifications must be delivered on the event loop thread, never in
    parallel with controller code.
    """

    def set_listener(self, listener: Optional[BackendListener]) -> None: ...

    async def play(self, audio: "AudioData", session: int) -> None:
        """Start playing ``audio`` from the beginning as ``session``."""
        ...

    async def stop(self) -> None:
        """Halt output; returns once the backend has acknowledged."""
        ...

    async def seek(self, position: float) -> None:
        """Move the playback head to ``position`` seconds."""
        ...

    async def close(self) -> None:
        """Release the output device."""
        ...


@runtime_checkable
class PreferenceStore(Protocol):
    """Key-value persistence for string lists."""

    def get_string_list(self, key: str) -> Optional[list[str]]:
        """Return the stored list, or None when the key is absent.

        Raises:
            PersistenceError: If the backend cannot be read
        """
        ...

    def set_string_list(self, key: str, values: list[str]) -> None:
        """Store ``values`` under ``key``.

        Raises:
            PersistenceError: If the value cannot be written
        """
        ...


@runtime_checkable
class ShareTarget(Protocol):
    """Hands an exported file to the platform share mechanism."""

    def share_file(self, path: Path, text: str, subject: str) -> None: ...


@runtime_checkable
class ClipPlayer(Protocol):
    """Capability handed to views that can start a clip."""

    async def play(self, category: str, name: str) -> None: ...
