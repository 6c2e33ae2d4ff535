"""
Playback controller - UI-agnostic.

Owns the single playback slot: which clip is active, where the playback
head is and how long the clip runs. Views observe it and drive it through
the ClipPlayer capability.
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import Optional

from soundboard.audio import AssetSource
from soundboard.exceptions import PlaybackError, PlaybackTimeoutError, wrap_audio_backend_error
from soundboard.model_manager import ObserverManager
from soundboard.models import IDLE, Clip, PlaybackSnapshot, PlaybackStatus
from soundboard.protocols import AudioBackend, PlaybackEvent, PlaybackObserver

logger = logging.getLogger(__name__)


class PlaybackController:
    """
    Single-slot playback state machine.

    States: Idle, Playing(clip). ``play`` always moves to Playing of the
    new clip (stopping the previous one first), ``stop`` and completion
    move to Idle, ``seek`` keeps the state.

    Each ``play`` opens a new backend session. Notifications from the
    backend carry their session number; anything from an older session is
    discarded, so a late completion of a replaced clip cannot reset the
    new one.

    Once a backend play has been issued the backend counts as live until a
    stop succeeds or the clip completes. A failed or timed out stop drops
    the controller to Idle but leaves the backend live, and the next
    ``play`` stops it before starting anything new.

    Implements:
    - BackendListener: for notifications from the audio backend
    - ClipPlayer: for views that start clips

    Threading:
        All methods must be called on the asyncio event loop thread. The
        backend delivers its notifications on that thread as well.
    """

    def __init__(self, backend: AudioBackend, assets: AssetSource, timeout: float = 5.0):
        """
        Initialize controller.

        Args:
            backend: Audio output
            assets: Resolves clips to decoded audio
            timeout: Seconds to wait for any single backend call
        """
        self.backend = backend
        self.assets = assets
        self.timeout = timeout

        self._snapshot: PlaybackSnapshot = IDLE
        self._generation = 0
        self._session: Optional[int] = None
        self._backend_live = False
        self._lock = asyncio.Lock()
        self._observers = ObserverManager[PlaybackObserver](observer_type_name="playback")

        backend.set_listener(self)

    # =================================================================
    # State
    # =================================================================

    @property
    def snapshot(self) -> PlaybackSnapshot:
        return self._snapshot

    @property
    def status(self) -> PlaybackStatus:
        return self._snapshot.status

    @property
    def active_clip(self) -> Optional[Clip]:
        return self._snapshot.active_clip

    @property
    def is_playing(self) -> bool:
        return self._snapshot.is_playing

    @property
    def position(self) -> float:
        return self._snapshot.position

    @property
    def total_duration(self) -> float:
        return self._snapshot.total_duration

    def is_clip_playing(self, clip: Clip) -> bool:
        return self._snapshot.is_playing and self._snapshot.active_clip == clip

    # =================================================================
    # Commands
    # =================================================================

    async def play(self, category: str, name: str) -> None:
        """ClipPlayer entry point."""
        await self.play_clip(Clip(category=category, name=name))

    async def play_clip(self, clip: Clip) -> None:
        """
        Stop whatever is playing and start ``clip`` from the beginning.

        Raises:
            AssetNotFoundError: If the clip has no audio file
            PlaybackBackendError: If decoding or the backend fails
            PlaybackTimeoutError: If the backend does not respond in time
        """
        async with self._lock:
            if self._session is not None or self._backend_live:
                await self._stop_locked()

            self._generation += 1
            session = self._generation
            self._session = session
            self._snapshot = PlaybackSnapshot(active_clip=clip, is_playing=True)

            try:
                audio = await asyncio.to_thread(self.assets.load_audio, clip)
                self._snapshot = PlaybackSnapshot(
                    active_clip=clip, is_playing=True, total_duration=audio.duration
                )
                self._backend_live = True
                await self._call("play", self.backend.play(audio, session), clip)
            except PlaybackError as e:
                logger.error(f"Cannot play {clip}: {e.technical_message}")
                self._fail()
                raise
            except asyncio.CancelledError:
                logger.warning(f"Playing {clip} was cancelled")
                self._fail()
                raise

            logger.info(f"Playing {clip} (session {session}, {audio.duration:.2f}s)")
            self._notify(PlaybackEvent.STARTED)

    async def stop(self) -> None:
        """Stop playback; does nothing when idle.

        Raises:
            PlaybackBackendError: If the backend fails (state is reset anyway)
            PlaybackTimeoutError: If the backend does not respond in time
        """
        async with self._lock:
            if self._session is None:
                return
            await self._stop_locked()

    async def seek(self, position: float) -> None:
        """
        Move the playback head, clamped into ``[0, total_duration]``.

        Does nothing when idle. A failed seek notifies FAILED but the clip
        stays active.
        """
        async with self._lock:
            if self._session is None:
                return

            clamped = min(max(position, 0.0), self._snapshot.total_duration)
            try:
                await self._call("seek", self.backend.seek(clamped), self._snapshot.active_clip)
            except PlaybackError as e:
                logger.error(f"Seek failed: {e.technical_message}")
                self._notify(PlaybackEvent.FAILED)
                raise

            self._snapshot = PlaybackSnapshot(
                active_clip=self._snapshot.active_clip,
                is_playing=self._snapshot.is_playing,
                position=clamped,
                total_duration=self._snapshot.total_duration,
            )
            self._notify(PlaybackEvent.POSITION_CHANGED)

    async def close(self) -> None:
        """Stop playback and release the backend."""
        try:
            await self.stop()
        finally:
            await self._call("close", self.backend.close())

    async def _stop_locked(self) -> None:
        clip = self._snapshot.active_clip
        was_active = self._session is not None
        try:
            await self._call("stop", self.backend.stop(), clip)
        except PlaybackError as e:
            logger.error(f"Stop failed, backend may still be playing: {e.technical_message}")
            self._fail()
            raise

        self._backend_live = False
        if not was_active:
            logger.info("Stopped leftover backend playback")
            return

        self._reset()
        logger.info(f"Stopped {clip}")
        self._notify(PlaybackEvent.STOPPED)

    async def _call(self, operation: str, call: Awaitable, clip: Optional[Clip] = None) -> None:
        """Await a backend call with the configured timeout, normalizing errors."""
        try:
            await asyncio.wait_for(call, timeout=self.timeout)
        except TimeoutError as e:
            raise PlaybackTimeoutError(operation, self.timeout, clip=clip) from e
        except PlaybackError:
            raise
        except Exception as e:
            error = wrap_audio_backend_error(e)
            error.clip = clip
            raise error from e

    def _reset(self) -> None:
        self._session = None
        self._snapshot = self._snapshot.idle()

    def _fail(self) -> None:
        self._reset()
        self._notify(PlaybackEvent.FAILED)

    # =================================================================
    # BackendListener Protocol
    # =================================================================

    def _is_current(self, session: int) -> bool:
        if session != self._session:
            logger.debug(f"Dropping notification of stale session {session}")
            return False
        return True

    def on_duration_changed(self, session: int, duration: float) -> None:
        if not self._is_current(session):
            return
        self._snapshot = PlaybackSnapshot(
            active_clip=self._snapshot.active_clip,
            is_playing=self._snapshot.is_playing,
            position=min(self._snapshot.position, duration),
            total_duration=duration,
        )
        self._notify(PlaybackEvent.DURATION_CHANGED)

    def on_position_changed(self, session: int, position: float) -> None:
        if not self._is_current(session):
            return
        self._snapshot = PlaybackSnapshot(
            active_clip=self._snapshot.active_clip,
            is_playing=self._snapshot.is_playing,
            position=position,
            total_duration=self._snapshot.total_duration,
        )
        self._notify(PlaybackEvent.POSITION_CHANGED)

    def on_complete(self, session: int) -> None:
        if not self._is_current(session):
            return
        clip = self._snapshot.active_clip
        self._backend_live = False
        self._reset()
        logger.info(f"Finished {clip}")
        self._notify(PlaybackEvent.COMPLETED)

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: PlaybackObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: PlaybackObserver) -> None:
        self._observers.unregister(observer)

    def _notify(self, event: PlaybackEvent) -> None:
        self._observers.notify("on_playback_event", event, self._snapshot)
