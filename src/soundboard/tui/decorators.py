"""Decorators for TUI components."""

import inspect
from functools import wraps

from soundboard.exceptions import format_error_for_display, notification_severity
from soundboard.exceptions import handle_errors as _handle_errors


def _notify_error(app, error: Exception) -> None:
    user_message, recovery_hint = format_error_for_display(error)
    if recovery_hint:
        user_message += f"\n{recovery_hint}"
    app.notify(user_message, severity=notification_severity(error), timeout=5)


def handle_action_errors(operation_name: str):
    """
    Decorator for TUI action methods.

    Logs through the centralized error handler, then shows the error as a
    notification instead of re-raising, so one failed action never takes
    the app down. Recoverable errors (timeouts, a busy device, a failed
    save) are shown as warnings, everything else as errors.

    Works for sync and async actions.

    Example:
        @handle_action_errors("share sound")
        async def action_share(self):
            ...
    """
    def decorator(func):
        logged = _handle_errors(operation_name=operation_name, re_raise=True)(func)

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(self, *args, **kwargs):
                try:
                    return await logged(self, *args, **kwargs)
                except Exception as e:
                    _notify_error(self, e)
                    return None
            return async_wrapper

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return logged(self, *args, **kwargs)
            except Exception as e:
                _notify_error(self, e)
                return None
        return wrapper
    return decorator
