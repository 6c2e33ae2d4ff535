"""File-backed preference store."""

import logging
from pathlib import Path
from threading import Lock
from typing import Optional

from pydantic import BaseModel, Field

from soundboard.exceptions import ConfigurationError, PersistenceError
from soundboard.model_manager import PydanticPersistence

logger = logging.getLogger(__name__)


class PreferencesFile(BaseModel):
    """On-disk layout: ``{"values": {key: [str, ...]}}``."""

    values: dict[str, list[str]] = Field(default_factory=dict)


class JsonPreferenceStore:
    """
    Preference store kept in a single JSON file.

    Writes go through PydanticPersistence (backup + atomic rename). A
    corrupted file is reported as PersistenceError and never overwritten,
    so it can be recovered by hand.

    Implements the PreferenceStore protocol.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()
        self._lock = Lock()

    def _read(self) -> PreferencesFile:
        try:
            return PydanticPersistence.load_json_or_default(self.path, PreferencesFile)
        except ConfigurationError as e:
            raise PersistenceError(
                "read preferences", path=self.path, original_error=e.technical_message
            ) from e

    def get_string_list(self, key: str) -> Optional[list[str]]:
        with self._lock:
            values = self._read().values.get(key)
        return list(values) if values is not None else None

    def set_string_list(self, key: str, values: list[str]) -> None:
        with self._lock:
            prefs = self._read()
            prefs.values[key] = list(values)
            try:
                PydanticPersistence.save_json(prefs, self.path)
            except OSError as e:
                raise PersistenceError("save preferences", path=self.path, original_error=str(e)) from e
        logger.debug(f"Stored {len(values)} value(s) under '{key}' in {self.path}")

    def __repr__(self) -> str:
        return f"JsonPreferenceStore({self.path})"


class MemoryPreferenceStore:
    """In-process preference store (headless runs and tests)."""

    def __init__(self, initial: Optional[dict[str, list[str]]] = None):
        self._values: dict[str, list[str]] = {k: list(v) for k, v in (initial or {}).items()}

    def get_string_list(self, key: str) -> Optional[list[str]]:
        values = self._values.get(key)
        return list(values) if values is not None else None

    def set_string_list(self, key: str, values: list[str]) -> None:
        self._values[key] = list(values)
