"""Tests for the exception hierarchy and error handlers."""

from unittest.mock import Mock

import pytest

from soundboard.exceptions import (
    AssetNotFoundError,
    ConfigFileInvalidError,
    ConfigValidationError,
    PersistenceError,
    PlaybackBackendError,
    PlaybackError,
    PlaybackTimeoutError,
    ShareError,
    SoundboardError,
    collect_errors,
    format_error_for_display,
    handle_errors,
    notification_severity,
    wrap_audio_backend_error,
)
from soundboard.models import Clip

WAMBO = Clip(category="spongeBob", name="Wambo")


@pytest.mark.unit
class TestHierarchy:

    def test_playback_errors(self, temp_dir):
        assert issubclass(AssetNotFoundError, PlaybackError)
        assert issubclass(PlaybackBackendError, PlaybackError)
        assert issubclass(PlaybackTimeoutError, PlaybackError)
        assert issubclass(PlaybackError, SoundboardError)

    def test_asset_not_found(self, temp_dir):
        error = AssetNotFoundError(WAMBO, temp_dir / "Wambo.mp3")
        assert error.clip == WAMBO
        assert "Wambo" in error.user_message
        assert str(temp_dir / "Wambo.mp3") in error.technical_message

    def test_timeout(self):
        error = PlaybackTimeoutError("stop", 2.0)
        assert "2.0s" in error.technical_message
        assert error.operation == "stop"

    def test_persistence_error(self, temp_dir):
        error = PersistenceError("save favorites", path=temp_dir, original_error="disk full")
        assert error.user_message == "Could not save favorites."
        assert "disk full" in error.technical_message
        assert ".bak" in error.recovery_hint

    def test_share_error_message(self):
        assert ShareError("Wambo", "boom").user_message == "Fehler beim Teilen: boom"

    def test_full_message_includes_hint(self):
        error = SoundboardError("Oops", recovery_hint="Try again")
        assert error.get_full_message() == "Oops\n\nSuggestion: Try again"
        assert str(error) == "Oops"

    def test_invalid_encoding_message(self):
        error = ConfigFileInvalidError("/tmp/prefs.json", "Not valid UTF-8: 'utf-8' codec can't decode")
        assert error.user_message == "Settings file is not UTF-8 text"
        assert "/tmp/prefs.json" in error.recovery_hint


@pytest.mark.unit
class TestRecoverable:

    def test_retryable_errors(self, temp_dir):
        assert PlaybackTimeoutError("play", 1.0).recoverable
        assert PlaybackBackendError().recoverable
        assert PersistenceError("save favorites").recoverable
        assert ShareError("Wambo", "boom").recoverable

    def test_errors_that_need_fixing_first(self, temp_dir):
        assert not AssetNotFoundError(WAMBO, temp_dir / "Wambo.mp3").recoverable
        assert not ConfigFileInvalidError("config.json", "File is empty").recoverable
        assert not ConfigValidationError("seek_step", -1, "must be > 0").recoverable

    def test_notification_severity(self, temp_dir):
        assert notification_severity(PlaybackTimeoutError("play", 1.0)) == "warning"
        assert notification_severity(AssetNotFoundError(WAMBO, temp_dir / "x.mp3")) == "error"
        assert notification_severity(RuntimeError("boom")) == "error"


@pytest.mark.unit
class TestHandleErrors:

    def test_re_raises_by_default(self):
        @handle_errors(operation_name="fail")
        def fail():
            raise SoundboardError("nope")

        with pytest.raises(SoundboardError):
            fail()

    def test_fallback_and_notification(self):
        notify = Mock()

        @handle_errors(operation_name="fail", user_notification=notify, re_raise=False, fallback_value=7)
        def fail():
            raise SoundboardError("nope", recovery_hint="hint")

        assert fail() == 7
        notify.assert_called_once_with("nope\n\nSuggestion: hint")

    def test_unexpected_error_notification(self):
        notify = Mock()

        @handle_errors(operation_name="fail", user_notification=notify, re_raise=False)
        def fail():
            raise ValueError("bad")

        assert fail() is None
        notify.assert_called_once_with("Error: bad")

    @pytest.mark.asyncio
    async def test_coroutine_functions(self):
        notify = Mock()

        @handle_errors(operation_name="fail", user_notification=notify, re_raise=False, fallback_value="x")
        async def fail():
            raise PlaybackError("async nope")

        assert await fail() == "x"
        notify.assert_called_once_with("async nope")


@pytest.mark.unit
class TestHelpers:

    def test_wrap_audio_backend_error(self):
        error = wrap_audio_backend_error(Exception("PaErrorCode -9996"), device_id=3)
        assert isinstance(error, PlaybackBackendError)
        assert error.user_message == "Audio device is not available."
        assert error.device_id == 3

    def test_wrap_unknown_audio_error(self):
        error = wrap_audio_backend_error(Exception("weird"))
        assert error.user_message == "Audio playback failed: weird"

    def test_format_error_for_display(self):
        assert format_error_for_display(SoundboardError("a", recovery_hint="b")) == ("a", "b")
        assert format_error_for_display(ValueError("x")) == ("ValueError: x", None)

    def test_collect_errors(self):
        collector = collect_errors("batch")
        with collector.try_operation("ok"):
            pass
        with collector.try_operation("bad"):
            raise SoundboardError("failed")

        assert collector.has_errors
        assert collector.error_count == 1
        assert collector.success_count == 1
        assert "bad: failed" in collector.get_summary()

    def test_collect_errors_lets_interrupts_through(self):
        collector = collect_errors("batch")
        with pytest.raises(KeyboardInterrupt):
            with collector.try_operation("interrupted"):
                raise KeyboardInterrupt
