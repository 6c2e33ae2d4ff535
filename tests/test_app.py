"""Tests for the application orchestrator."""

from unittest.mock import Mock

import pytest

from soundboard.app import SoundboardApp
from soundboard.models import Clip
from soundboard.preferences import MemoryPreferenceStore
from soundboard.services.favorites_service import FAVORITES_KEY


@pytest.fixture
def soundboard(config, catalog, fake_backend, memory_store):
    return SoundboardApp(config, catalog=catalog, backend=fake_backend, store=memory_store, share_target=Mock())


@pytest.mark.unit
class TestSoundboardApp:

    def test_wiring(self, soundboard, config, fake_backend):
        assert soundboard.player.backend is fake_backend
        assert soundboard.player.timeout == config.backend_timeout
        assert soundboard.sharing.share_dir == config.share_dir
        assert soundboard.assets.extension == "wav"

    def test_initialize_all_present(self, soundboard):
        soundboard.initialize()
        assert soundboard.unavailable == set()
        assert soundboard.favorites.is_loaded

    def test_initialize_marks_missing_clips(self, soundboard, sounds_dir):
        (sounds_dir / "spongeBob" / "Wambo.wav").unlink()
        soundboard.initialize()

        wambo = Clip(category="spongeBob", name="Wambo")
        assert soundboard.unavailable == {wambo}
        assert not soundboard.is_available(wambo)

    def test_initialize_loads_favorites(self, config, catalog, fake_backend):
        store = MemoryPreferenceStore({FAVORITES_KEY: ["drawnTogether/AUA"]})
        soundboard = SoundboardApp(config, catalog=catalog, backend=fake_backend, store=store)
        soundboard.initialize()
        assert soundboard.favorites.favorites == (Clip(category="drawnTogether", name="AUA"),)

    def test_default_store_uses_preferences_path(self, config, catalog, fake_backend):
        soundboard = SoundboardApp(config, catalog=catalog, backend=fake_backend)
        soundboard.initialize()
        soundboard.favorites.add_favorite(Clip(category="spongeBob", name="Wambo"))
        assert config.preferences_path.exists()

    @pytest.mark.asyncio
    async def test_shutdown_stops_playback(self, soundboard, fake_backend):
        await soundboard.player.play("spongeBob", "Wambo")
        await soundboard.shutdown()

        assert soundboard.player.active_clip is None
        assert fake_backend.closed
