"""Tests for asset resolution and audio loading."""

import numpy as np
import pytest
import soundfile as sf

from soundboard.audio import AssetSource, AudioLoader
from soundboard.exceptions import AssetNotFoundError, PlaybackBackendError
from soundboard.models import Clip

WAMBO = Clip(category="spongeBob", name="Wambo")


@pytest.mark.unit
class TestAssetSource:

    def test_path_for(self, temp_dir):
        assets = AssetSource(temp_dir, extension=".mp3")
        assert assets.path_for(WAMBO) == temp_dir / "spongeBob" / "Wambo.mp3"

    def test_exists(self, assets):
        assert assets.exists(WAMBO)
        assert not assets.exists(Clip(category="spongeBob", name="Nope"))

    def test_load_bytes(self, assets, sounds_dir):
        assert assets.load_bytes(WAMBO) == (sounds_dir / "spongeBob" / "Wambo.wav").read_bytes()

    def test_missing_raises_asset_not_found(self, assets):
        clip = Clip(category="spongeBob", name="Nope")
        with pytest.raises(AssetNotFoundError) as exc_info:
            assets.load_bytes(clip)
        assert exc_info.value.clip == clip
        assert "soundboard check" in exc_info.value.recovery_hint

    def test_load_audio(self, assets):
        audio = assets.load_audio(WAMBO)
        assert audio.sample_rate == 44100
        assert audio.duration == pytest.approx(0.5, abs=0.01)

    def test_undecodable_file_raises_backend_error(self, assets, sounds_dir):
        (sounds_dir / "spongeBob" / "Wambo.wav").write_bytes(b"not audio at all")
        with pytest.raises(PlaybackBackendError) as exc_info:
            assets.load_audio(WAMBO)
        assert exc_info.value.clip == WAMBO

    def test_validate_reports_missing(self, assets, catalog, sounds_dir):
        assert assets.validate(catalog) == set()

        (sounds_dir / "drawnTogether" / "AUA.wav").unlink()
        assert assets.validate(catalog) == {Clip(category="drawnTogether", name="AUA")}


@pytest.mark.unit
class TestAudioLoader:

    def test_load_mono(self, sample_audio_file):
        audio = AudioLoader().load(sample_audio_file)
        assert audio.num_channels == 1
        assert audio.num_frames == 4410
        assert audio.data.dtype == np.float32

    def test_load_stereo(self, temp_dir):
        path = temp_dir / "stereo.wav"
        sf.write(str(path), np.zeros((1000, 2), dtype=np.float32), 22050)
        audio = AudioLoader().load(path)
        assert audio.num_channels == 2
        assert audio.sample_rate == 22050

    def test_resample(self, sample_audio_file):
        audio = AudioLoader(target_sample_rate=22050).load(sample_audio_file)
        assert audio.sample_rate == 22050
        assert audio.num_frames == 2205

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            AudioLoader().load(temp_dir / "missing.wav")

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.wav"
        sf.write(str(path), np.zeros(0, dtype=np.float32), 44100)
        with pytest.raises(RuntimeError):
            AudioLoader().load(path)
