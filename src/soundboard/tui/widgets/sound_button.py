"""Button representing a single sound."""

from textual.color import Color
from textual.widgets import Button

from soundboard.models import Clip


class SoundButton(Button):
    """
    Button for one clip (presentation only).

    Shows the formatted clip name in the category color. State is applied
    through CSS classes: ``playing``, ``favorite`` and ``unavailable``.
    Presses bubble up as ``Button.Pressed``; the app reads ``clip``.
    """

    DEFAULT_CSS = """
    SoundButton {
        width: 100%;
        height: 3;
        margin: 0 0 1 0;
    }

    SoundButton.playing {
        border: tall $success;
        text-style: bold;
    }

    SoundButton.unavailable {
        text-style: strike;
    }
    """

    def __init__(self, clip: Clip, color: str | None = None, available: bool = True) -> None:
        """
        Initialize sound button.

        Args:
            clip: The clip this button plays
            color: Category accent color (hex)
            available: False disables the button (asset missing)
        """
        super().__init__(clip.display_name, disabled=not available)
        self.clip = clip
        self._color = color
        self._is_playing = False
        self._is_favorite = False
        self.set_class(not available, "unavailable")

    def on_mount(self) -> None:
        if self._color:
            self.styles.background = Color.parse(self._color).with_alpha(0.35)

    def set_playing(self, playing: bool) -> None:
        if playing == self._is_playing:
            return
        self._is_playing = playing
        self.set_class(playing, "playing")
        self._update_label()

    def set_favorite(self, favorite: bool) -> None:
        if favorite == self._is_favorite:
            return
        self._is_favorite = favorite
        self.set_class(favorite, "favorite")
        self._update_label()

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def is_favorite(self) -> bool:
        return self._is_favorite

    def _update_label(self) -> None:
        prefix = "▶ " if self._is_playing else ""
        suffix = " ★" if self._is_favorite else ""
        self.label = f"{prefix}{self.clip.display_name}{suffix}"

    def set_available(self, available: bool) -> None:
        self.disabled = not available
        self.set_class(not available, "unavailable")
