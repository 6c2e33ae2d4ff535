"""Shared helpers for CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from soundboard.exceptions import format_error_for_display
from soundboard.models import DEFAULT_CATALOG, AppConfig, Clip

logger = logging.getLogger(__name__)


def config_path(ctx: click.Context) -> Optional[Path]:
    """Config file chosen with ``--config`` (None = default location)."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path")


def load_config(ctx: click.Context) -> AppConfig:
    """Load the configuration, exiting with a readable message on failure."""
    try:
        return AppConfig.load_or_default(config_path(ctx))
    except Exception as e:
        fail(e)


def resolve_clip(category: str, name: str) -> Clip:
    """Clip from command arguments; unknown sounds are a usage error."""
    clip = Clip(category=category, name=name)
    if not DEFAULT_CATALOG.contains(clip):
        raise click.BadParameter(
            f"Unknown sound '{clip.key}'. Run 'soundboard list' to see all sounds.",
            param_hint="CATEGORY NAME",
        )
    return clip


def fail(error: Exception) -> NoReturn:
    """Print an error the way the main command does and exit with status 1."""
    logger.error(f"Command failed: {error}")
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"Error: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"Hint: {recovery_hint}", err=True)
    sys.exit(1)
