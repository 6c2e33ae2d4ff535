"""Favorites service: the user's persisted list of favorite clips."""

import logging
from collections.abc import Iterable
from typing import Optional

from soundboard.exceptions import PersistenceError
from soundboard.model_manager import ObserverManager
from soundboard.models import DELIMITER, Catalog, Clip
from soundboard.protocols import FavoritesEvent, FavoritesObserver, PreferenceStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


def serialize_favorites(clips: Iterable[Clip]) -> list[str]:
    """Encode clips as ``category/name`` strings, order preserved."""
    return [f"{clip.category}{DELIMITER}{clip.name}" for clip in clips]


def parse_favorites(entries: Iterable[str]) -> list[Clip]:
    """
    Decode ``category/name`` strings.

    Only the first delimiter splits, so a clip name may itself contain
    ``/``; a category containing ``/`` cannot be represented. Malformed
    entries are skipped and duplicates collapsed (first one wins).
    """
    clips: list[Clip] = []
    for entry in entries:
        category, sep, name = entry.partition(DELIMITER)
        if not sep or not category or not name:
            logger.warning(f"Skipping malformed favorite entry: {entry!r}")
            continue
        clip = Clip(category=category, name=name)
        if clip not in clips:
            clips.append(clip)
    return clips


class FavoritesService:
    """
    Owns the favorites list and keeps it in sync with a PreferenceStore.

    The list is empty until ``load()`` has run. Every mutation notifies
    observers synchronously and then persists the whole list.

    Persistence is acknowledged synchronously: a failed write is retried
    ``save_retries`` times; if it still fails the error is logged and
    observers receive SAVE_FAILED. The caller is never raised at and the
    in-memory change stands for the rest of the session.
    """

    def __init__(
        self,
        store: PreferenceStore,
        catalog: Optional[Catalog] = None,
        save_retries: int = 1,
    ):
        self._store = store
        self._catalog = catalog
        self._save_retries = save_retries
        self._favorites: list[Clip] = []
        self._loaded = False
        self._observers = ObserverManager[FavoritesObserver](observer_type_name="favorites")

    # =================================================================
    # Queries
    # =================================================================

    @property
    def favorites(self) -> tuple[Clip, ...]:
        """All favorites in insertion order."""
        return tuple(self._favorites)

    @property
    def visible_favorites(self) -> tuple[Clip, ...]:
        """Favorites that still exist in the catalog (stale ones are hidden)."""
        if self._catalog is None:
            return self.favorites
        return tuple(clip for clip in self._favorites if self._catalog.contains(clip))

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def is_favorite(self, clip: Clip) -> bool:
        return clip in self._favorites

    def __len__(self) -> int:
        return len(self._favorites)

    # =================================================================
    # Loading
    # =================================================================

    def load(self) -> tuple[Clip, ...]:
        """
        Read favorites from the store.

        An absent key means "no favorites yet"; an unreadable store is
        logged and treated the same way.
        """
        try:
            entries = self._store.get_string_list(FAVORITES_KEY)
        except PersistenceError as e:
            logger.error(f"Favorites unavailable, starting empty: {e.technical_message}")
            entries = None
        else:
            if entries is None:
                logger.info("No favorites stored yet")

        self._favorites = parse_favorites(entries or [])
        self._loaded = True
        logger.info(f"Loaded {len(self._favorites)} favorite(s)")

        self._observers.notify("on_favorites_event", FavoritesEvent.LOADED, None)
        return self.favorites

    # =================================================================
    # Mutations
    # =================================================================

    def add_favorite(self, clip: Clip) -> None:
        """
        Add a clip; adding an existing favorite does nothing.

        Raises:
            ValueError: If the category contains the delimiter and so could
                not be read back from the store
        """
        if DELIMITER in clip.category:
            raise ValueError(
                f"Cannot store favorite {clip.key!r}: category must not contain {DELIMITER!r}"
            )
        if clip in self._favorites:
            return

        self._favorites.append(clip)
        logger.info(f"Added favorite: {clip}")
        self._observers.notify("on_favorites_event", FavoritesEvent.ADDED, clip)
        self._save()

    def remove_favorite(self, clip: Clip) -> None:
        """Remove every entry equal to ``clip`` (observers are notified even if none matched)."""
        before = len(self._favorites)
        self._favorites = [fav for fav in self._favorites if fav != clip]
        removed = before - len(self._favorites)
        logger.info(f"Removed favorite: {clip}" if removed else f"Favorite not present: {clip}")

        self._observers.notify("on_favorites_event", FavoritesEvent.REMOVED, clip)
        self._save()

    def toggle_favorite(self, clip: Clip) -> bool:
        """Flip favorite state; returns True if the clip is now a favorite."""
        if self.is_favorite(clip):
            self.remove_favorite(clip)
            return False
        self.add_favorite(clip)
        return True

    def _save(self) -> bool:
        entries = serialize_favorites(self._favorites)
        last_error: Optional[PersistenceError] = None

        for attempt in range(self._save_retries + 1):
            try:
                self._store.set_string_list(FAVORITES_KEY, entries)
                return True
            except PersistenceError as e:
                last_error = e
                logger.warning(f"Saving favorites failed (attempt {attempt + 1}): {e.technical_message}")

        logger.error(f"Favorites not saved, changes only last for this session: {last_error}")
        self._observers.notify("on_favorites_event", FavoritesEvent.SAVE_FAILED, None, error=last_error)
        return False

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: FavoritesObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: FavoritesObserver) -> None:
        self._observers.unregister(observer)
