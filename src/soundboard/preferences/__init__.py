"""Key-value preference stores."""

from .json_store import JsonPreferenceStore, MemoryPreferenceStore, PreferencesFile

__all__ = ["JsonPreferenceStore", "MemoryPreferenceStore", "PreferencesFile"]
