"""Single-voice audio backend on top of sounddevice."""

import asyncio
import logging
from threading import Lock
from typing import Callable, Optional

import numpy as np
import sounddevice as sd

from soundboard.exceptions import wrap_audio_backend_error
from soundboard.protocols import BackendListener

from .data import AudioData, Voice

logger = logging.getLogger(__name__)


class SoundDeviceBackend:
    """
    Audio output with exactly one playback slot.

    The PortAudio callback runs on its own thread; every notification it
    produces is handed to the asyncio loop with ``call_soon_threadsafe``
    so listeners only ever run on the event loop thread.

    Implements the AudioBackend protocol.
    """

    def __init__(
        self,
        device: Optional[int] = None,
        buffer_size: int = 512,
        num_channels: int = 2,
        position_interval: float = 0.1,
    ):
        """
        Initialize backend (the stream is opened lazily on first play).

        Args:
            device: Output device ID (None for system default)
            buffer_size: Audio buffer size in frames
            num_channels: Number of output channels (1=mono, 2=stereo)
            position_interval: Seconds between position notifications
        """
        self.device = device
        self.buffer_size = buffer_size
        self.num_channels = num_channels
        self.position_interval = position_interval

        self._stream: Optional[sd.OutputStream] = None
        self._stream_rate: Optional[int] = None
        self._voice: Optional[Voice] = None
        self._last_reported = 0
        self._lock = Lock()
        self._listener: Optional[BackendListener] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def set_listener(self, listener: Optional[BackendListener]) -> None:
        self._listener = listener

    # =================================================================
    # AudioBackend Protocol
    # =================================================================

    async def play(self, audio: AudioData, session: int) -> None:
        """
        Start ``audio`` as ``session``, replacing any current voice.

        Raises:
            PlaybackBackendError: If the output stream cannot be opened
        """
        self._loop = asyncio.get_running_loop()
        await asyncio.to_thread(self._ensure_stream, audio.sample_rate)

        with self._lock:
            self._voice = Voice(audio=audio, session=session)
            self._last_reported = 0

        logger.debug(f"Session {session}: playing {audio.duration:.2f}s at {audio.sample_rate} Hz")
        self._post(self._emit_duration, session, audio.duration)

    async def stop(self) -> None:
        with self._lock:
            voice, self._voice = self._voice, None
        if voice:
            logger.debug(f"Session {voice.session}: stopped")

    async def seek(self, position: float) -> None:
        with self._lock:
            if self._voice:
                self._voice.seek(position)
                self._voice.finished = False
                self._last_reported = self._voice.position

    async def close(self) -> None:
        await self.stop()
        await asyncio.to_thread(self._close_stream)

    # =================================================================
    # Stream lifecycle
    # =================================================================

    def _ensure_stream(self, sample_rate: int) -> None:
        """Open (or reopen at a new sample rate) the output stream."""
        if self._stream is not None and self._stream_rate == sample_rate:
            return

        self._close_stream()
        try:
            self._stream = sd.OutputStream(
                samplerate=sample_rate,
                blocksize=self.buffer_size,
                channels=self.num_channels,
                device=self.device,
                dtype=np.float32,
                callback=self._audio_callback,
            )
            self._stream.start()
        except Exception as e:
            self._stream = None
            logger.error(f"Failed to open audio stream: {e}")
            raise wrap_audio_backend_error(e, device_id=self.device) from e

        self._stream_rate = sample_rate
        logger.info(
            f"Audio stream started: {sample_rate} Hz, {self.buffer_size} frames, "
            f"latency {self._stream.latency * 1000:.1f}ms"
        )

    def _close_stream(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.stop()
            self._stream.close()
        except Exception as e:
            logger.warning(f"Error closing audio stream: {e}")
        self._stream = None
        self._stream_rate = None
        logger.info("Audio stream closed")

    # =================================================================
    # Audio thread
    # =================================================================

    def _audio_callback(self, outdata: np.ndarray, frames: int, time_info, status) -> None:
        """PortAudio callback: render the current voice or silence."""
        if status:
            logger.warning(f"Audio callback status: {status}")

        outdata.fill(0)
        with self._lock:
            voice = self._voice
            if voice is None:
                return

            try:
                chunk = voice.read(frames, self.num_channels)
            except Exception as e:
                logger.exception(f"Error in audio callback: {e}")
                chunk = None
                voice.finished = True

            if chunk is not None:
                if self.num_channels == 1:
                    outdata[:len(chunk), 0] = chunk
                else:
                    outdata[:len(chunk)] = chunk

            interval_frames = int(self.position_interval * voice.audio.sample_rate)
            report_position = voice.position - self._last_reported >= interval_frames
            if report_position:
                self._last_reported = voice.position

            finished = voice.finished
            if finished:
                self._voice = None

        if report_position and not finished:
            self._post(self._emit_position, voice.session, voice.time_elapsed)
        if finished:
            self._post(self._emit_complete, voice.session)

    def _post(self, callback: Callable, *args) -> None:
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        try:
            loop.call_soon_threadsafe(callback, *args)
        except RuntimeError:
            # Loop shut down between the check and the call
            logger.debug("Event loop closed, dropping backend notification")

    def _emit_duration(self, session: int, duration: float) -> None:
        if self._listener:
            self._listener.on_duration_changed(session, duration)

    def _emit_position(self, session: int, position: float) -> None:
        if self._listener:
            self._listener.on_position_changed(session, position)

    def _emit_complete(self, session: int) -> None:
        if self._listener:
            self._listener.on_complete(session)

    @property
    def is_open(self) -> bool:
        return self._stream is not None
