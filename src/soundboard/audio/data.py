"""Audio data structures.

These are dataclasses rather than Pydantic models because they hold
NumPy buffers and are touched from the audio callback.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt


@dataclass(slots=True)
class AudioData:
    """Decoded clip audio."""

    data: npt.NDArray[np.float32]  # (num_frames,) or (num_frames, num_channels)
    sample_rate: int                # Sample rate in Hz
    num_channels: int               # 1=mono, 2=stereo
    num_frames: int                 # Frames per channel

    @classmethod
    def from_array(cls, data: npt.NDArray[np.float32], sample_rate: int) -> "AudioData":
        """
        Create AudioData from a NumPy array.

        Args:
            data: Shape (num_frames,) for mono or (num_frames, num_channels)
            sample_rate: Sample rate in Hz
        """
        if data.ndim == 1:
            num_channels = 1
            num_frames = len(data)
        elif data.ndim == 2:
            num_frames, num_channels = data.shape
        else:
            raise ValueError(f"Audio data must be 1D or 2D, got {data.ndim}D")

        if data.dtype != np.float32:
            data = data.astype(np.float32)

        return cls(data=data, sample_rate=sample_rate, num_channels=num_channels, num_frames=num_frames)

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return self.num_frames / self.sample_rate

    def frames_for(self, seconds: float) -> int:
        """Convert seconds into a frame index inside the buffer."""
        return max(0, min(int(seconds * self.sample_rate), self.num_frames))


@dataclass(slots=True)
class Voice:
    """
    Playback cursor over one clip.

    Owned by the audio thread; the backend only swaps whole voices or
    moves the cursor through ``seek``.
    """

    audio: AudioData
    session: int
    position: int = 0          # frames
    finished: bool = False

    def seek(self, seconds: float) -> None:
        self.position = self.audio.frames_for(seconds)

    def read(self, num_frames: int, num_channels: int) -> Optional[npt.NDArray[np.float32]]:
        """
        Return up to ``num_frames`` frames converted to ``num_channels``
        and advance the cursor. Returns None once the clip has ended.
        """
        if self.finished or self.position >= self.audio.num_frames:
            self.finished = True
            return None

        end = min(self.position + num_frames, self.audio.num_frames)
        frames = self.audio.data[self.position:end]
        self.position = end
        if self.position >= self.audio.num_frames:
            self.finished = True
        return match_channels(frames, self.audio.num_channels, num_channels)

    @property
    def time_elapsed(self) -> float:
        """Elapsed playback time in seconds."""
        return self.position / self.audio.sample_rate


def match_channels(
    frames: npt.NDArray[np.float32],
    source_channels: int,
    target_channels: int,
) -> npt.NDArray[np.float32]:
    """Convert audio frames to the output channel count."""
    if source_channels == target_channels:
        return frames

    if source_channels == 1:
        return np.repeat(frames[:, np.newaxis], target_channels, axis=1)

    if target_channels == 1:
        return np.mean(frames, axis=1, dtype=np.float32)

    # Multi-channel to stereo: take the first channels
    return frames[:, :target_channels]
