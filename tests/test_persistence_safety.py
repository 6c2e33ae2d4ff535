"""Tests for persistence safety features (backups, atomic writes, corruption handling)."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel

from soundboard.exceptions import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from soundboard.model_manager import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


@pytest.mark.unit
class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original", value=1), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()

        backup_data = PydanticPersistence.load_json(backup_path, SampleModel)
        assert backup_data.name == "original"

        current_data = PydanticPersistence.load_json(config_path, SampleModel)
        assert current_data.name == "modified"
        assert current_data.value == 2

    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original"), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified"), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        """Test that temporary file is cleaned up after successful write."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="test", value=123), config_path)

        assert not config_path.with_suffix(".json.tmp").exists()
        loaded = PydanticPersistence.load_json(config_path, SampleModel)
        assert loaded.value == 123

    def test_save_creates_parent_directories(self, tmp_path: Path):
        config_path = tmp_path / "nested" / "dir" / "config.json"
        PydanticPersistence.save_json(SampleModel(), config_path)
        assert config_path.exists()

    def test_load_json_or_default_missing_file(self, tmp_path: Path):
        """Test load_json_or_default with missing file."""
        config_path = tmp_path / "missing.json"

        result = PydanticPersistence.load_json_or_default(config_path, SampleModel)

        assert result.name == "test"
        assert result.value == 42
        # Should NOT create file
        assert not config_path.exists()

    def test_load_json_or_default_with_factory(self, tmp_path: Path):
        result = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json",
            SampleModel,
            default_factory=lambda: SampleModel(name="custom", value=999),
        )
        assert result.name == "custom"

    def test_load_json_or_default_corrupted_file_raises(self, tmp_path: Path):
        """Test that load_json_or_default raises on corrupted files."""
        config_path = tmp_path / "corrupted.json"
        config_path.write_text("{ invalid }", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            PydanticPersistence.load_json_or_default(config_path, SampleModel)

        # Corrupted file left untouched
        assert config_path.read_text(encoding="utf-8") == "{ invalid }"

    def test_invalid_json_is_file_invalid_error(self, tmp_path: Path):
        config_path = tmp_path / "corrupted.json"
        config_path.write_text("{ invalid }", encoding="utf-8")
        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(config_path, SampleModel)

    def test_empty_file_is_file_invalid_error(self, tmp_path: Path):
        config_path = tmp_path / "empty.json"
        config_path.write_text("   ", encoding="utf-8")
        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(config_path, SampleModel)

    def test_invalid_utf8_is_file_invalid_error(self, tmp_path: Path):
        config_path = tmp_path / "binary.json"
        config_path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(config_path, SampleModel)

    def test_schema_mismatch_is_validation_error(self, tmp_path: Path):
        config_path = tmp_path / "invalid_schema.json"
        config_path.write_text(json.dumps({"value": "not a number"}), encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            PydanticPersistence.load_json(config_path, SampleModel)
        assert "value" in exc_info.value.user_message

    def test_load_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "nope.json", SampleModel)
