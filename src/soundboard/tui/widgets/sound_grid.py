"""Grid of sound buttons."""

from collections.abc import Callable, Iterable

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Static

from soundboard.models import Catalog, Clip

from .sound_button import SoundButton


class SoundGrid(Container):
    """
    Responsive grid of SoundButtons.

    The grid is data-driven: ``set_clips`` replaces its buttons and
    ``sync`` reapplies playing/favorite state. With no clips it shows
    ``empty_text`` instead.
    """

    DEFAULT_CSS = """
    SoundGrid {
        layout: grid;
        grid-size: 3;
        grid-gutter: 0 1;
        height: auto;
        padding: 1 1 0 1;
    }

    SoundGrid > .empty {
        column-span: 3;
        width: 100%;
        content-align: center middle;
        color: $text-muted;
        padding: 2;
    }
    """

    def __init__(
        self,
        catalog: Catalog,
        clips: Iterable[Clip] = (),
        is_available: Callable[[Clip], bool] = lambda clip: True,
        empty_text: str = "",
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.catalog = catalog
        self.is_available = is_available
        self.empty_text = empty_text
        self._clips: list[Clip] = list(clips)

    def compose(self) -> ComposeResult:
        yield from self._build()

    def _build(self):
        if not self._clips and self.empty_text:
            yield Static(self.empty_text, classes="empty")
            return
        for clip in self._clips:
            yield SoundButton(clip, self.catalog.color_for(clip.category), self.is_available(clip))

    @property
    def clips(self) -> list[Clip]:
        return list(self._clips)

    @property
    def buttons(self) -> list[SoundButton]:
        return list(self.query(SoundButton))

    async def set_clips(self, clips: Iterable[Clip]) -> None:
        """Replace all buttons (no-op when the clip list is unchanged)."""
        clips = list(clips)
        if clips == self._clips and self.is_mounted and self.children:
            return
        self._clips = clips
        await self.remove_children()
        await self.mount_all(list(self._build()))

    def sync(self, is_playing: Callable[[Clip], bool], is_favorite: Callable[[Clip], bool]) -> None:
        for button in self.buttons:
            button.set_playing(is_playing(button.clip))
            button.set_favorite(is_favorite(button.clip))

    def sync_availability(self) -> None:
        for button in self.buttons:
            button.set_available(self.is_available(button.clip))
