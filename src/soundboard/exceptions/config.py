"""Errors for ``~/.soundboard/config.json`` and other JSON files read at startup."""

from typing import Any

from .base import SoundboardError


class ConfigurationError(SoundboardError):
    """A settings file cannot be used as it is."""

    def __init__(self, user_message: str, **kwargs):
        kwargs.setdefault("recoverable", False)
        super().__init__(user_message, **kwargs)


class ConfigFileInvalidError(ConfigurationError):
    """The file exists but is not a readable JSON document."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: The offending file
            parse_error: Reason from the reader (empty, bad encoding, JSON syntax)
        """
        reason = parse_error.lower()
        if "empty" in reason:
            user_msg = "Settings file is empty"
        elif "utf-8" in reason:
            user_msg = "Settings file is not UTF-8 text"
        else:
            user_msg = "Settings file is not valid JSON"

        super().__init__(
            user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recovery_hint=(
                f"Fix or delete {file_path}; it is recreated with defaults. "
                "A copy of the last good version may be next to it as .bak."
            ),
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A setting has a value the soundboard cannot use."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Args:
            field: Name of the rejected setting
            value: The rejected value
            error_msg: Why it was rejected
            file_path: File the value came from, if any
        """
        recovery = f"Run 'soundboard config set {field} <value>' or 'soundboard config reset --field {field}'"
        if file_path:
            recovery += f"\nConfig file: {file_path}"
        if field == "default_audio_device":
            recovery += "\nRun 'soundboard audio list' to see valid device IDs"

        super().__init__(
            f"Invalid value for '{field}': {error_msg}",
            technical_message=f"Validation failed for {field}={value!r}: {error_msg}",
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
