"""
Centralized error handling utilities.

Errors are translated layer by layer:

```
USER LAYER (CLI/TUI)       formats user_message / recovery_hint
        ^ SoundboardError
SERVICES                   catch low-level errors, add context
        ^ OSError, PortAudioError, ValidationError, ...
LOW LEVEL (audio, files)
```

## Handling Patterns

| Pattern | Code |
|---------|------|
| Show error to user, continue | `@handle_errors(operation_name="play", user_notification=self.notify, re_raise=False)` |
| Log and re-raise | `@handle_errors(operation_name="load config")` |
| Try multiple ops, collect errors | `collector = collect_errors("check assets"); with collector.try_operation(...): ...` |

Nothing in the soundboard is fatal: every failure degrades to
"feature unavailable this time".
"""

import inspect
import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .base import SoundboardError
from .config import ConfigFileInvalidError, ConfigValidationError
from .playback import PlaybackBackendError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _report(
    error: Exception,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]],
    log_level: int,
) -> None:
    if isinstance(error, SoundboardError):
        logger.log(log_level, f"Failed to {operation_name}: {error.technical_message}")
        if user_notification:
            user_notification(error.get_full_message())
    else:
        logger.log(log_level, f"Unexpected error during {operation_name}: {error}", exc_info=True)
        if user_notification:
            user_notification(f"Error: {error}")


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator for consistent error handling.

    Works on plain functions and on coroutine functions (TUI actions and
    playback calls are async).

    Args:
        operation_name: Name of the operation for logging (e.g., "play sound")
        user_notification: Optional callback to notify user (e.g., self.notify)
        fallback_value: Value to return if error occurs and re_raise=False
        re_raise: Whether to re-raise the exception after handling
        log_level: Logging level for the error (default: ERROR)

    Returns:
        Decorated function
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    _report(e, operation_name, user_notification, log_level)
                    if re_raise:
                        raise
                    return fallback_value

            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _report(e, operation_name, user_notification, log_level)
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


def wrap_pydantic_error(error: Exception, file_path: str) -> SoundboardError:
    """
    Convert Pydantic validation errors to Soundboard exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(field="unknown", value=None, error_msg=error_msg, file_path=file_path)


def wrap_audio_backend_error(error: Exception, device_id: Optional[int] = None) -> PlaybackBackendError:
    """
    Convert low-level audio errors (PortAudio, sounddevice, soundfile)
    to a PlaybackBackendError with a user-friendly message.

    Args:
        error: The original exception from the audio library
        device_id: The device ID involved in the error

    Returns:
        PlaybackBackendError
    """
    error_msg = str(error)

    if "PaErrorCode -9996" in error_msg or "Invalid device" in error_msg:
        user_msg = "Audio device is not available."
    elif "PaErrorCode -9985" in error_msg or "Device unavailable" in error_msg:
        user_msg = "Audio device is already in use by another application."
    elif "format not recognised" in error_msg.lower() or "unsupported" in error_msg.lower():
        user_msg = "Sound file format is not supported."
    else:
        user_msg = f"Audio playback failed: {error_msg}"

    return PlaybackBackendError(user_message=user_msg, original_error=error_msg, device_id=device_id)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, SoundboardError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def notification_severity(error: Exception) -> str:
    """``"warning"`` for errors worth retrying, ``"error"`` for everything else."""
    if isinstance(error, SoundboardError) and error.recoverable:
        return "warning"
    return "error"


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("check assets")

        for clip in catalog.clips():
            with collector.try_operation(clip.key):
                assets.require(clip)

        if collector.has_errors:
            print(collector.get_summary())
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Args:
            sub_operation: Description of this specific operation
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """Get a multi-line summary of collected errors."""
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = f"Failed {self.error_count} of {self.error_count + self.success_count} operations:\n"
        for sub_op, error in self.errors:
            if isinstance(error, SoundboardError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not issubclass(exc_type, Exception):
                return False

            self.collector.errors.append((self.sub_operation, exc_val))
            return True
