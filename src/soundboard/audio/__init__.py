"""Audio assets, decoding and output."""

from .assets import AssetSource
from .backend import SoundDeviceBackend
from .data import AudioData, Voice
from .loader import AudioLoader

__all__ = [
    "AssetSource",
    "AudioData",
    "AudioLoader",
    "SoundDeviceBackend",
    "Voice",
]
