"""Tests for the sounddevice backend (audio stream mocked)."""

import asyncio
from unittest.mock import Mock, patch

import numpy as np
import pytest

from soundboard.audio import AudioData, SoundDeviceBackend
from soundboard.exceptions import PlaybackBackendError


@pytest.fixture
def listener():
    return Mock()


@pytest.fixture
def audio():
    return AudioData.from_array(np.ones(100, dtype=np.float32), sample_rate=100)


@pytest.fixture
def mock_stream():
    with patch("soundboard.audio.backend.sd.OutputStream") as stream_cls:
        stream_cls.return_value.latency = 0.01
        yield stream_cls


@pytest.fixture
def backend(listener, mock_stream):
    backend = SoundDeviceBackend(buffer_size=40, num_channels=2, position_interval=0.1)
    backend.set_listener(listener)
    return backend


def render(backend, frames: int = 40) -> np.ndarray:
    outdata = np.zeros((frames, 2), dtype=np.float32)
    backend._audio_callback(outdata, frames, None, None)
    return outdata


@pytest.mark.unit
@pytest.mark.asyncio
class TestSoundDeviceBackend:

    async def test_play_opens_stream_and_reports_duration(self, backend, listener, audio, mock_stream):
        await backend.play(audio, 7)
        await asyncio.sleep(0)

        assert backend.is_open
        mock_stream.assert_called_once()
        assert mock_stream.call_args.kwargs["samplerate"] == 100
        listener.on_duration_changed.assert_called_once_with(7, 1.0)

    async def test_stream_reused_for_same_rate(self, backend, audio, mock_stream):
        await backend.play(audio, 1)
        await backend.play(audio, 2)
        assert mock_stream.call_count == 1

    async def test_stream_reopened_for_new_rate(self, backend, audio, mock_stream):
        await backend.play(audio, 1)
        other = AudioData.from_array(np.ones(10, dtype=np.float32), sample_rate=50)
        await backend.play(other, 2)
        assert mock_stream.call_count == 2

    async def test_callback_renders_and_completes(self, backend, listener, audio):
        await backend.play(audio, 3)

        out = render(backend)
        assert out[:, 0].tolist() == [1.0] * 40
        render(backend)
        render(backend)
        await asyncio.sleep(0)

        listener.on_position_changed.assert_called()
        assert all(c.args[0] == 3 for c in listener.on_position_changed.call_args_list)
        listener.on_complete.assert_called_once_with(3)

    async def test_silence_when_stopped(self, backend, listener, audio):
        await backend.play(audio, 1)
        await backend.stop()

        out = render(backend)
        await asyncio.sleep(0)

        assert not out.any()
        listener.on_complete.assert_not_called()

    async def test_seek_moves_cursor(self, backend, listener, audio):
        await backend.play(audio, 1)
        await backend.seek(0.9)
        render(backend)
        await asyncio.sleep(0)
        listener.on_complete.assert_called_once_with(1)

    async def test_stream_error_is_wrapped(self, backend, audio, mock_stream):
        mock_stream.side_effect = Exception("Error opening OutputStream: PaErrorCode -9985 Device unavailable")
        with pytest.raises(PlaybackBackendError) as exc_info:
            await backend.play(audio, 1)
        assert exc_info.value.user_message == "Audio device is already in use by another application."
        assert not backend.is_open

    async def test_close(self, backend, audio, mock_stream):
        await backend.play(audio, 1)
        await backend.close()
        assert not backend.is_open
        mock_stream.return_value.close.assert_called_once()
