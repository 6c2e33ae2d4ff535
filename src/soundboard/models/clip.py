"""Clip identity model."""

from pydantic import BaseModel, ConfigDict, Field

from soundboard.utils import format_clip_name

DELIMITER = "/"


class Clip(BaseModel):
    """Identity of one sound: its category and its raw name.

    Frozen so that equality and hashing are structural; used as the key
    for favorite membership and for "is this clip currently playing".
    """

    model_config = ConfigDict(frozen=True)

    category: str = Field(description="Catalog category key")
    name: str = Field(description="Raw clip name (file stem)")

    @property
    def key(self) -> str:
        """Return ``category/name``."""
        return f"{self.category}{DELIMITER}{self.name}"

    @property
    def display_name(self) -> str:
        """Human-readable clip title."""
        return format_clip_name(self.name)

    def __str__(self) -> str:
        return self.key
