"""Application configuration model."""

import tempfile
from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from soundboard.model_manager.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".soundboard" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Assets
    sounds_dir: Path = Field(
        default_factory=lambda: Path.home() / ".soundboard" / "sounds",
        description="Root directory of the bundled sounds (<sounds_dir>/<category>/<name>.<ext>)",
    )
    audio_extension: str = Field(default="mp3", description="File extension of the sound files")

    # Persistence
    preferences_path: Path = Field(
        default_factory=lambda: Path.home() / ".soundboard" / "preferences.json",
        description="Preference store file (favorites)",
    )
    save_retries: int = Field(
        default=1, ge=0, le=5, description="Retries when saving favorites fails"
    )

    # Sharing
    share_dir: Path | None = Field(
        default=None,
        description="Where shared sounds are exported (None = system temp directory)",
    )

    # Audio
    default_audio_device: int | None = Field(
        default=None, description="Audio output device ID (None = system default)"
    )
    default_buffer_size: int = Field(default=512, gt=0, description="Audio buffer size in frames")
    backend_timeout: float = Field(
        default=5.0, gt=0, description="Timeout for audio backend calls (seconds)"
    )
    seek_step: float = Field(default=5.0, gt=0, description="Seek step for arrow keys (seconds)")

    @field_serializer("sounds_dir", "preferences_path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @field_serializer("share_dir")
    def serialize_optional_path(self, path: Path | None) -> str | None:
        return str(path) if path is not None else None

    @property
    def resolved_share_dir(self) -> Path:
        """Export directory for shared sounds."""
        return self.share_dir or Path(tempfile.gettempdir()) / "soundboard-share"

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.soundboard/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
