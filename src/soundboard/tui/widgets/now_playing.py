"""Now-playing bar: position, clip name, duration and progress."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label, ProgressBar

from soundboard.models import PlaybackSnapshot
from soundboard.utils import format_duration


class NowPlaying(Horizontal):
    """
    Shows the active clip; hidden while nothing is playing.

    Shows:
    - Elapsed time
    - Clip name
    - Progress
    - Total duration
    """

    DEFAULT_CSS = """
    NowPlaying {
        height: 1;
        dock: bottom;
        background: $panel;
        padding: 0 1;
        display: none;
    }

    NowPlaying.active {
        display: block;
    }

    NowPlaying Label {
        padding: 0 1;
    }

    NowPlaying #now-playing-name {
        width: 1fr;
        text-style: bold;
    }

    NowPlaying ProgressBar {
        width: 30;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._snapshot = PlaybackSnapshot()

    def compose(self) -> ComposeResult:
        yield Label("00:00", id="now-playing-position")
        yield Label("", id="now-playing-name")
        yield ProgressBar(total=1.0, show_eta=False, show_percentage=False, id="now-playing-progress")
        yield Label("00:00", id="now-playing-duration")

    @property
    def snapshot(self) -> PlaybackSnapshot:
        return self._snapshot

    def update_snapshot(self, snapshot: PlaybackSnapshot) -> None:
        """Render a playback snapshot."""
        self._snapshot = snapshot
        self.set_class(snapshot.active_clip is not None, "active")
        if snapshot.active_clip is None:
            return

        self.query_one("#now-playing-position", Label).update(format_duration(snapshot.position))
        self.query_one("#now-playing-name", Label).update(f"▶ {snapshot.active_clip.display_name}")
        self.query_one("#now-playing-duration", Label).update(format_duration(snapshot.total_duration))
        self.query_one("#now-playing-progress", ProgressBar).update(total=1.0, progress=snapshot.progress)
