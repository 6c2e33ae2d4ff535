"""Resolve catalog clips to their bundled audio files."""

import logging
from pathlib import Path
from typing import Optional

from soundboard.exceptions import AssetNotFoundError, collect_errors, wrap_audio_backend_error
from soundboard.models import Catalog, Clip

from .data import AudioData
from .loader import AudioLoader

logger = logging.getLogger(__name__)


class AssetSource:
    """
    Asset-loading capability for the catalog.

    Every clip lives at ``<sounds_dir>/<category>/<name>.<extension>``.
    """

    def __init__(self, sounds_dir: Path, extension: str = "mp3", loader: Optional[AudioLoader] = None):
        self.sounds_dir = Path(sounds_dir).expanduser()
        self.extension = extension.lstrip(".")
        self._loader = loader or AudioLoader()

    def path_for(self, clip: Clip) -> Path:
        return self.sounds_dir / clip.category / f"{clip.name}.{self.extension}"

    def exists(self, clip: Clip) -> bool:
        return self.path_for(clip).is_file()

    def require(self, clip: Clip) -> Path:
        """Return the clip's path.

        Raises:
            AssetNotFoundError: If the file is missing
        """
        path = self.path_for(clip)
        if not path.is_file():
            raise AssetNotFoundError(clip, path)
        return path

    def load_bytes(self, clip: Clip) -> bytes:
        """Raw file content of a clip."""
        return self.require(clip).read_bytes()

    def load_audio(self, clip: Clip) -> AudioData:
        """
        Decode a clip.

        Raises:
            AssetNotFoundError: If the file is missing
            PlaybackBackendError: If the file cannot be decoded
        """
        path = self.require(clip)
        try:
            return self._loader.load(path)
        except RuntimeError as e:
            error = wrap_audio_backend_error(e)
            error.clip = clip
            raise error from e

    def validate(self, catalog: Catalog) -> set[Clip]:
        """
        Check every catalog clip and return the ones without an audio file.

        Missing clips are logged once here so the UI can disable them
        instead of failing at play time.
        """
        collector = collect_errors("check sound files")
        missing: set[Clip] = set()

        for clip in catalog.clips():
            with collector.try_operation(clip.key):
                self.require(clip)

        for _, error in collector.errors:
            if isinstance(error, AssetNotFoundError) and error.clip is not None:
                missing.add(error.clip)

        if collector.has_errors:
            logger.warning(f"{collector.error_count} sound file(s) missing under {self.sounds_dir}")
            logger.debug(collector.get_summary())
        else:
            logger.info(f"All {collector.success_count} sound files present under {self.sounds_dir}")

        return missing
