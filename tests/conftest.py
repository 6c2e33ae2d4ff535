"""Pytest fixtures for tests."""

import asyncio
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Optional

import numpy as np
import pytest
import soundfile as sf

from soundboard.audio import AssetSource
from soundboard.models import AppConfig, Catalog
from soundboard.preferences import MemoryPreferenceStore

SAMPLE_RATE = 44100


def write_tone(path: Path, duration: float = 0.1, sample_rate: int = SAMPLE_RATE) -> Path:
    """Write a short sine tone as WAV."""
    t = np.linspace(0, duration, int(sample_rate * duration), dtype=np.float32)
    audio_data = np.sin(2 * np.pi * 440 * t).astype(np.float32)
    path.parent.mkdir(parents=True, exist_ok=True)
    sf.write(str(path), audio_data, sample_rate)
    return path


class FakeBackend:
    """
    AudioBackend double that records calls.

    Notifications are only sent when a test calls ``emit_*``. Operations
    listed in ``fail_on`` raise, those in ``hang_on`` never return.
    """

    def __init__(self):
        self.listener = None
        self.calls: list[tuple] = []
        self.sessions: list[int] = []
        self.fail_on: set[str] = set()
        self.hang_on: set[str] = set()
        self.closed = False

    def set_listener(self, listener) -> None:
        self.listener = listener

    async def _maybe_fail(self, operation: str) -> None:
        if operation in self.hang_on:
            await asyncio.Event().wait()
        if operation in self.fail_on:
            raise RuntimeError(f"{operation} failed: PaErrorCode -9996 Invalid device")

    async def play(self, audio, session: int) -> None:
        await self._maybe_fail("play")
        self.calls.append(("play", session))
        self.sessions.append(session)

    async def stop(self) -> None:
        await self._maybe_fail("stop")
        self.calls.append(("stop",))

    async def seek(self, position: float) -> None:
        await self._maybe_fail("seek")
        self.calls.append(("seek", position))

    async def close(self) -> None:
        self.calls.append(("close",))
        self.closed = True

    @property
    def last_session(self) -> Optional[int]:
        return self.sessions[-1] if self.sessions else None

    def emit_duration(self, session: int, duration: float) -> None:
        self.listener.on_duration_changed(session, duration)

    def emit_position(self, session: int, position: float) -> None:
        self.listener.on_position_changed(session, position)

    def emit_complete(self, session: int) -> None:
        self.listener.on_complete(session)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_audio_array():
    """Create a simple test audio array (0.1s sine wave at 440Hz)."""
    t = np.linspace(0, 0.1, int(SAMPLE_RATE * 0.1), dtype=np.float32)
    return np.sin(2 * np.pi * 440 * t).astype(np.float32)


@pytest.fixture
def sample_audio_file(temp_dir):
    """Create a simple test audio file."""
    return write_tone(temp_dir / "test.wav")


@pytest.fixture
def catalog():
    """Small catalog with two categories."""
    return Catalog.from_mapping(
        {
            "spongeBob": ["Wambo", "Miau_Song"],
            "drawnTogether": ["AUA", "IchKannFliegen"],
        },
        titles={"spongeBob": "SpongeBob", "drawnTogether": "Drawn Together"},
        colors={"spongeBob": "#FFEB3B", "drawnTogether": "#E91E63"},
    )


@pytest.fixture
def sounds_dir(temp_dir, catalog):
    """Sound tree with a WAV file for every catalog clip."""
    root = temp_dir / "sounds"
    for clip in catalog.clips():
        write_tone(root / clip.category / f"{clip.name}.wav", duration=0.5)
    return root


@pytest.fixture
def assets(sounds_dir):
    return AssetSource(sounds_dir, extension="wav")


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def memory_store():
    return MemoryPreferenceStore()


@pytest.fixture
def config(temp_dir, sounds_dir):
    """Configuration pointing everything into the temp directory."""
    return AppConfig(
        sounds_dir=sounds_dir,
        audio_extension="wav",
        preferences_path=temp_dir / "preferences.json",
        share_dir=temp_dir / "share",
        backend_timeout=0.5,
    )
