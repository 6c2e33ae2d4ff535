"""Main TUI application."""

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Button, Collapsible, Footer, Header, TabbedContent, TabPane

from soundboard.models import Clip, PlaybackSnapshot
from soundboard.protocols import FavoritesEvent, PlaybackEvent

from .decorators import handle_action_errors
from .widgets import NowPlaying, SoundButton, SoundGrid

if TYPE_CHECKING:
    from soundboard.app import SoundboardApp

logger = logging.getLogger(__name__)

EMPTY_FAVORITES_TEXT = "Keine Favoriten"


class SoundboardTUI(App):
    """
    Textual TUI for the soundboard.

    This is a PURE UI layer: playback, favorites and sharing live in the
    SoundboardApp services. The TUI observes the playback controller and
    the favorites service and re-renders from their state.

    Implements PlaybackObserver and FavoritesObserver via structural
    subtyping (no explicit inheritance to avoid metaclass conflicts
    between App and Protocol).

    Tabs:
    - Alle Sounds: every clip in catalog order
    - Favoriten: the favorites still present in the catalog
    - Kategorien: one collapsible section per category
    """

    TITLE = "Soundboard"

    CSS = """
    Collapsible {
        padding: 0;
    }
    """

    BINDINGS = [
        Binding("f", "toggle_favorite", "Favorit", show=True),
        Binding("s", "share", "Teilen", show=True),
        Binding("escape", "stop", "Stop", show=True, priority=True),
        Binding("left", "seek(-1)", "Zurück", show=False, priority=True),
        Binding("right", "seek(1)", "Vor", show=False, priority=True),
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(self, soundboard: "SoundboardApp"):
        """
        Initialize the Textual UI application.

        Args:
            soundboard: The orchestrator (may not be initialized yet;
                        sound files and favorites load in a worker)
        """
        super().__init__()
        self.soundboard = soundboard
        self.catalog = soundboard.catalog
        self._shut_down = False
        logger.info("Soundboard TUI created")

    # =================================================================
    # Layout & Lifecycle
    # =================================================================

    def compose(self) -> ComposeResult:
        yield Header()
        with TabbedContent(initial="tab-all"):
            with TabPane("Alle Sounds", id="tab-all"):
                with VerticalScroll():
                    yield SoundGrid(
                        self.catalog,
                        self.catalog.clips(),
                        is_available=self.soundboard.is_available,
                        id="grid-all",
                    )
            with TabPane("Favoriten", id="tab-favorites"):
                with VerticalScroll():
                    yield SoundGrid(
                        self.catalog,
                        self.soundboard.favorites.visible_favorites,
                        is_available=self.soundboard.is_available,
                        empty_text=EMPTY_FAVORITES_TEXT,
                        id="grid-favorites",
                    )
            with TabPane("Kategorien", id="tab-categories"):
                with VerticalScroll():
                    for key in self.catalog.categories:
                        with Collapsible(title=self.catalog.title_for(key), collapsed=False):
                            yield SoundGrid(
                                self.catalog,
                                self.catalog.clips(key),
                                is_available=self.soundboard.is_available,
                                classes="category-grid",
                            )
        yield NowPlaying()
        yield Footer()

    def on_mount(self) -> None:
        self.soundboard.player.register_observer(self)
        self.run_worker(self._load_soundboard(), name="load", exclusive=True)

    @handle_action_errors("load soundboard")
    async def _load_soundboard(self) -> None:
        """Check sound files and read favorites off the event loop."""
        await asyncio.to_thread(self.soundboard.initialize)
        self.soundboard.favorites.register_observer(self)

        for grid in self.query(SoundGrid):
            grid.sync_availability()
        await self._refresh_favorites()

        missing = len(self.soundboard.unavailable)
        if missing:
            self.notify(f"{missing} Sound(s) nicht gefunden", severity="warning", timeout=5)
        logger.info("TUI loaded")

    async def _shutdown(self) -> None:
        if self._shut_down:
            return
        self._shut_down = True
        self.soundboard.player.unregister_observer(self)
        if self.soundboard.favorites.is_loaded:
            self.soundboard.favorites.unregister_observer(self)
        await self.soundboard.shutdown()

    # =================================================================
    # Observers
    # =================================================================

    def on_playback_event(self, event: PlaybackEvent, snapshot: PlaybackSnapshot) -> None:
        """Handle playback state changes (called on the event loop)."""
        self.query_one(NowPlaying).update_snapshot(snapshot)
        if event in (PlaybackEvent.STARTED, PlaybackEvent.STOPPED, PlaybackEvent.COMPLETED, PlaybackEvent.FAILED):
            self._sync_buttons()

    def on_favorites_event(self, event: FavoritesEvent, clip: Optional[Clip] = None, **kwargs) -> None:
        """Handle favorites changes."""
        if event == FavoritesEvent.SAVE_FAILED:
            self.notify(
                "Favoriten konnten nicht gespeichert werden",
                severity="warning",
                timeout=5,
            )
            return
        self.call_later(self._refresh_favorites)

    async def _refresh_favorites(self) -> None:
        await self.query_one("#grid-favorites", SoundGrid).set_clips(
            self.soundboard.favorites.visible_favorites
        )
        self._sync_buttons()

    def _sync_buttons(self) -> None:
        player = self.soundboard.player
        favorites = self.soundboard.favorites
        for grid in self.query(SoundGrid):
            grid.sync(player.is_clip_playing, favorites.is_favorite)

    # =================================================================
    # Input
    # =================================================================

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, SoundButton):
            event.stop()
            self.run_worker(self._play(event.button.clip), group="playback")

    def _target_clip(self) -> Optional[Clip]:
        """The focused sound, else the one playing."""
        if isinstance(self.focused, SoundButton):
            return self.focused.clip
        return self.soundboard.player.active_clip

    @handle_action_errors("play sound")
    async def _play(self, clip: Clip) -> None:
        await self.soundboard.player.play_clip(clip)

    @handle_action_errors("stop sound")
    async def action_stop(self) -> None:
        await self.soundboard.player.stop()

    @handle_action_errors("seek")
    async def action_seek(self, direction: int) -> None:
        player = self.soundboard.player
        if player.active_clip is None:
            return
        await player.seek(player.position + direction * self.soundboard.config.seek_step)

    @handle_action_errors("toggle favorite")
    def action_toggle_favorite(self) -> None:
        clip = self._target_clip()
        if clip is None:
            return
        if self.soundboard.favorites.toggle_favorite(clip):
            self.notify(f"{clip.display_name} zu Favoriten hinzugefügt", timeout=2)
        else:
            self.notify(f"{clip.display_name} aus Favoriten entfernt", timeout=2)

    @handle_action_errors("share sound")
    async def action_share(self) -> None:
        clip = self._target_clip()
        if clip is None:
            return
        path = await asyncio.to_thread(self.soundboard.sharing.share, clip)
        self.notify(f"{clip.display_name} exportiert: {path}", timeout=4)

    async def action_quit(self) -> None:
        try:
            await self._shutdown()
        except Exception as e:
            logger.error(f"Error during shutdown: {e}", exc_info=True)
        self.exit()
