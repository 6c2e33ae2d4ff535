"""Favorites command implementations."""

import click

from soundboard.models import DEFAULT_CATALOG, Clip
from soundboard.preferences import JsonPreferenceStore
from soundboard.protocols import FavoritesEvent
from soundboard.services import FavoritesService

from ..context import fail, load_config, resolve_clip


class _SaveWatcher:
    """Remembers whether a favorites save failed."""

    def __init__(self):
        self.error = None

    def on_favorites_event(self, event, clip=None, **kwargs) -> None:
        if event == FavoritesEvent.SAVE_FAILED:
            self.error = kwargs.get("error")


def _service(ctx: click.Context) -> tuple[FavoritesService, _SaveWatcher]:
    config = load_config(ctx)
    service = FavoritesService(
        JsonPreferenceStore(config.preferences_path),
        catalog=DEFAULT_CATALOG,
        save_retries=config.save_retries,
    )
    service.load()
    watcher = _SaveWatcher()
    service.register_observer(watcher)
    return service, watcher


@click.group(name="favorites")
def favorites_group():
    """Manage favorite sounds."""
    pass


@favorites_group.command(name="list")
@click.pass_context
def list_favorites(ctx: click.Context):
    """List favorite sounds."""
    service, _ = _service(ctx)
    visible = service.visible_favorites
    if not visible:
        click.echo("Keine Favoriten")
        return
    for clip in visible:
        click.echo(f"★ {clip.display_name:<28} {clip.key}")


@favorites_group.command(name="add")
@click.argument("category")
@click.argument("name")
@click.pass_context
def add_favorite(ctx: click.Context, category: str, name: str):
    """Add a sound to the favorites."""
    clip = resolve_clip(category, name)
    service, watcher = _service(ctx)
    if service.is_favorite(clip):
        click.echo(f"{clip.display_name} is already a favorite")
        return
    service.add_favorite(clip)
    if watcher.error:
        fail(watcher.error)
    click.echo(f"✓ Added {clip.display_name}")


@favorites_group.command(name="remove")
@click.argument("category")
@click.argument("name")
@click.pass_context
def remove_favorite(ctx: click.Context, category: str, name: str):
    """Remove a sound from the favorites."""
    service, watcher = _service(ctx)
    clip = Clip(category=category, name=name)
    if not service.is_favorite(clip):
        click.echo(f"{clip.key} is not a favorite")
        return
    service.remove_favorite(clip)
    if watcher.error:
        fail(watcher.error)
    click.echo(f"✓ Removed {clip.display_name}")
