"""Catalog command implementations: list, play, share, check."""

import asyncio
import logging
from typing import Optional

import click

from soundboard.app import SoundboardApp
from soundboard.audio import AssetSource
from soundboard.exceptions import SoundboardError
from soundboard.models import DEFAULT_CATALOG, PlaybackSnapshot
from soundboard.preferences import JsonPreferenceStore
from soundboard.protocols import PlaybackEvent
from soundboard.services import FavoritesService
from soundboard.utils import format_duration

from ..context import fail, load_config, resolve_clip

logger = logging.getLogger(__name__)


@click.command(name="list")
@click.option("--category", "-c", type=str, default=None, help="Only list one category")
@click.pass_context
def list_sounds(ctx: click.Context, category: Optional[str]):
    """List all sounds (★ marks favorites)."""
    config = load_config(ctx)

    if category is not None and category not in DEFAULT_CATALOG.categories:
        raise click.BadParameter(
            f"Unknown category '{category}'. Available: {', '.join(DEFAULT_CATALOG.categories)}",
            param_hint="--category",
        )

    favorites = FavoritesService(JsonPreferenceStore(config.preferences_path), catalog=DEFAULT_CATALOG)
    favorites.load()

    keys = [category] if category else DEFAULT_CATALOG.categories
    for key in keys:
        click.echo(f"{DEFAULT_CATALOG.title_for(key)} ({key}):")
        for clip in DEFAULT_CATALOG.clips(key):
            marker = "★" if favorites.is_favorite(clip) else " "
            click.echo(f"  {marker} {clip.display_name:<28} {clip.name}")
        click.echo()


class _WaitForEnd:
    """Playback observer that resolves once the clip is over."""

    def __init__(self):
        self.done = asyncio.Event()
        self.event: Optional[PlaybackEvent] = None

    def on_playback_event(self, event: PlaybackEvent, snapshot: PlaybackSnapshot) -> None:
        if event == PlaybackEvent.DURATION_CHANGED:
            click.echo(f"Duration: {format_duration(snapshot.total_duration)}")
        if event in (PlaybackEvent.COMPLETED, PlaybackEvent.STOPPED, PlaybackEvent.FAILED):
            self.event = event
            self.done.set()


async def _play(app: SoundboardApp, category: str, name: str) -> None:
    waiter = _WaitForEnd()
    app.player.register_observer(waiter)
    try:
        await app.player.play(category, name)
        await waiter.done.wait()
    finally:
        await app.shutdown()


@click.command(name="play")
@click.argument("category")
@click.argument("name")
@click.pass_context
def play(ctx: click.Context, category: str, name: str):
    """Play one sound and wait until it has finished."""
    clip = resolve_clip(category, name)
    config = load_config(ctx)
    app = SoundboardApp(config)

    click.echo(f"Playing {clip.display_name}... (Ctrl+C to stop)")
    try:
        asyncio.run(_play(app, clip.category, clip.name))
    except KeyboardInterrupt:
        logger.info("Playback interrupted by user")
        click.echo("\nStopped.")
    except SoundboardError as e:
        fail(e)


@click.command(name="share")
@click.argument("category")
@click.argument("name")
@click.pass_context
def share(ctx: click.Context, category: str, name: str):
    """Export a sound and show it in the file manager."""
    clip = resolve_clip(category, name)
    config = load_config(ctx)
    app = SoundboardApp(config)

    try:
        path = app.sharing.share(clip)
    except SoundboardError as e:
        fail(e)
    click.echo(f"Exported {clip.display_name} to {path}")


@click.command(name="check")
@click.pass_context
def check(ctx: click.Context):
    """Check that every sound has its audio file."""
    config = load_config(ctx)
    assets = AssetSource(config.sounds_dir, config.audio_extension)
    missing = assets.validate(DEFAULT_CATALOG)

    total = len(DEFAULT_CATALOG)
    if not missing:
        click.echo(f"✓ All {total} sounds found in {assets.sounds_dir}")
        return

    click.echo(f"✗ {len(missing)} of {total} sounds missing in {assets.sounds_dir}:", err=True)
    for clip in DEFAULT_CATALOG.clips():
        if clip in missing:
            click.echo(f"  {assets.path_for(clip)}", err=True)
    ctx.exit(1)
