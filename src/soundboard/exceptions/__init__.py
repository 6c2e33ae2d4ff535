"""
Custom exception hierarchy for Soundboard.

## Exception Hierarchy

```
SoundboardError (base)
├── PlaybackError
│   ├── AssetNotFoundError
│   ├── PlaybackBackendError
│   └── PlaybackTimeoutError
├── PersistenceError
├── ShareError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions carry a `user_message` for display, a
`technical_message` for logs, a `recoverable` flag and an optional
`recovery_hint`.

See `soundboard.exceptions.handlers` for utilities to handle these
exceptions systematically.
"""

from .base import SoundboardError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    handle_errors,
    notification_severity,
    wrap_audio_backend_error,
    wrap_pydantic_error,
)
from .playback import (
    AssetNotFoundError,
    PlaybackBackendError,
    PlaybackError,
    PlaybackTimeoutError,
)
from .storage import PersistenceError, ShareError

__all__ = [
    # Playback
    "AssetNotFoundError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    "ErrorCollector",
    "PersistenceError",
    "PlaybackBackendError",
    "PlaybackError",
    "PlaybackTimeoutError",
    "ShareError",
    # Base
    "SoundboardError",
    # Handlers
    "collect_errors",
    "format_error_for_display",
    "handle_errors",
    "notification_severity",
    "wrap_audio_backend_error",
    "wrap_pydantic_error",
]
