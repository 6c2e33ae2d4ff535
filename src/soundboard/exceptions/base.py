"""Root of the soundboard error hierarchy.

Every failure the soundboard reports (a missing sound, a silent audio
device, an unwritable preferences file) is a SoundboardError. None of them
end the program; the views show ``user_message`` and carry on.
"""

from typing import Optional


class SoundboardError(Exception):
    """
    A soundboard feature is unavailable for now.

    Attributes:
        user_message: Shown in the TUI notification or after ``Error:`` in the CLI
        technical_message: Written to the log file
        recoverable: True if trying the same action again may succeed
            (device busy, timeout, disk full); False if something has to be
            fixed first (missing file, broken config). The TUI shows
            recoverable errors as warnings.
        recovery_hint: What the user can do about it
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = True,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
