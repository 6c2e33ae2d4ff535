"""Persistence and sharing exceptions."""

from pathlib import Path
from typing import Optional

from .base import SoundboardError


class PersistenceError(SoundboardError):
    """Preference store could not be read or written."""

    def __init__(self, operation: str, path: Optional[Path] = None, original_error: Optional[str] = None):
        """
        Initialize persistence error.

        Args:
            operation: What was attempted (e.g. "save favorites")
            path: Backing file, if the store is file-based
            original_error: The underlying error message
        """
        user_msg = f"Could not {operation}."
        tech_msg = f"Failed to {operation}"
        if path:
            tech_msg += f" ({path})"
        if original_error:
            tech_msg += f": {original_error}"

        recovery = None
        if path:
            recovery = f"Check permissions of {path}. A backup (.bak) may be available."

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recovery_hint=recovery,
        )
        self.operation = operation
        self.path = path


class ShareError(SoundboardError):
    """Exporting or handing a clip to the platform share mechanism failed."""

    def __init__(self, clip_name: str, original_error: str):
        super().__init__(
            user_message=f"Fehler beim Teilen: {original_error}",
            technical_message=f"Sharing '{clip_name}' failed: {original_error}",
        )
        self.clip_name = clip_name
