"""
Top-level Soundboard Application Orchestrator.

Wires the services together so every front end (TUI, CLI, tests) works
with the same objects.
"""

import logging
from typing import Optional

from soundboard.audio import AssetSource, SoundDeviceBackend
from soundboard.core import PlaybackController
from soundboard.models import DEFAULT_CATALOG, AppConfig, Catalog, Clip
from soundboard.preferences import JsonPreferenceStore
from soundboard.protocols import AudioBackend, PreferenceStore, ShareTarget
from soundboard.services import FavoritesService, RevealShareTarget, ShareService

logger = logging.getLogger(__name__)


class SoundboardApp:
    """
    Top-level orchestrator for the soundboard.

    Architecture:
        SoundboardApp (this class)
        ├── Catalog: fixed categories and clips
        ├── Assets: clip -> audio file
        ├── Services: playback, favorites, share
        └── UIs (observers): textual TUI, CLI
    """

    def __init__(
        self,
        config: AppConfig,
        catalog: Catalog = DEFAULT_CATALOG,
        backend: Optional[AudioBackend] = None,
        store: Optional[PreferenceStore] = None,
        share_target: Optional[ShareTarget] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Application configuration
            catalog: Sound catalog
            backend: Audio backend (sounddevice output if None)
            store: Preference store (JSON file from config if None)
            share_target: Share mechanism (file manager reveal if None)
        """
        self.config = config
        self.catalog = catalog

        self.assets = AssetSource(config.sounds_dir, config.audio_extension)
        self.backend = backend or SoundDeviceBackend(
            device=config.default_audio_device,
            buffer_size=config.default_buffer_size,
        )
        self.player = PlaybackController(self.backend, self.assets, timeout=config.backend_timeout)
        self.favorites = FavoritesService(
            store or JsonPreferenceStore(config.preferences_path),
            catalog=catalog,
            save_retries=config.save_retries,
        )
        self.sharing = ShareService(
            self.assets, config.resolved_share_dir, share_target or RevealShareTarget()
        )

        self.unavailable: set[Clip] = set()
        self._initialized = False

    def initialize(self) -> None:
        """Check sound files and load favorites."""
        if self._initialized:
            return
        self.unavailable = self.assets.validate(self.catalog)
        self.favorites.load()
        self._initialized = True
        logger.info(
            f"Soundboard ready: {len(self.catalog.clips())} sounds, "
            f"{len(self.unavailable)} unavailable, {len(self.favorites)} favorites"
        )

    def is_available(self, clip: Clip) -> bool:
        return clip not in self.unavailable

    async def shutdown(self) -> None:
        """Stop playback and release the audio device."""
        logger.info("Shutting down soundboard")
        await self.player.close()
