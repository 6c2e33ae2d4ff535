"""Export a clip to a file and hand it to the platform share mechanism."""

import logging
from pathlib import Path

import click

from soundboard.audio import AssetSource
from soundboard.exceptions import ShareError, SoundboardError
from soundboard.models import Clip
from soundboard.protocols import ShareTarget

logger = logging.getLogger(__name__)

SHARE_SUBJECT = "Soundboard Sound"


def share_message(clip: Clip) -> str:
    return f"Check out this sound: {clip.name}"


class RevealShareTarget:
    """Shows the exported file in the system file manager."""

    def share_file(self, path: Path, text: str, subject: str) -> None:
        logger.info(f"{subject}: {text} ({path})")
        result = click.launch(str(path), locate=True)
        if result != 0:
            raise OSError(f"file manager exited with status {result}")


class ShareService:
    """
    Copies a clip's audio into ``share_dir`` and passes it to a ShareTarget.

    The exported file is named after the clip (``<name>.<ext>``), so a
    repeated share of the same clip overwrites the previous export.
    """

    def __init__(self, assets: AssetSource, share_dir: Path, target: ShareTarget):
        self.assets = assets
        self.share_dir = Path(share_dir).expanduser()
        self.target = target

    def export(self, clip: Clip) -> Path:
        """Write the clip's bytes to the share directory and return the file."""
        data = self.assets.load_bytes(clip)
        self.share_dir.mkdir(parents=True, exist_ok=True)
        path = self.share_dir / f"{clip.name}.{self.assets.extension}"
        path.write_bytes(data)
        logger.debug(f"Exported {clip} to {path} ({len(data)} bytes)")
        return path

    def share(self, clip: Clip) -> Path:
        """
        Export and share a clip.

        Returns:
            Path of the exported file

        Raises:
            ShareError: If loading, writing or handing off the file fails
        """
        try:
            path = self.export(clip)
            self.target.share_file(path, share_message(clip), SHARE_SUBJECT)
        except SoundboardError as e:
            logger.error(f"Sharing {clip} failed: {e.technical_message}")
            raise ShareError(clip.name, e.user_message) from e
        except OSError as e:
            logger.error(f"Sharing {clip} failed: {e}")
            raise ShareError(clip.name, str(e)) from e

        logger.info(f"Shared {clip}")
        return path
