"""Application services."""

from .favorites_service import FAVORITES_KEY, FavoritesService, parse_favorites, serialize_favorites
from .share_service import SHARE_SUBJECT, RevealShareTarget, ShareService, share_message

__all__ = [
    "FAVORITES_KEY",
    "SHARE_SUBJECT",
    "FavoritesService",
    "RevealShareTarget",
    "ShareService",
    "parse_favorites",
    "serialize_favorites",
    "share_message",
]
