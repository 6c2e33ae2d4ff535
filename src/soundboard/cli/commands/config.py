"""
Config command implementations.

Commands:
    - config show [--field FIELD]     # Display configuration
    - config set FIELD VALUE          # Update one setting
    - config reset [--field FIELD]    # Reset to defaults
"""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from soundboard.exceptions import ConfigValidationError, SoundboardError
from soundboard.models import AppConfig
from soundboard.models.config import DEFAULT_CONFIG_PATH

from ..context import config_path, fail, load_config

logger = logging.getLogger(__name__)

_NONE_VALUES = {"", "none", "null", "default"}


@click.group(name="config")
def config():
    """Configure the soundboard."""
    pass


@config.command(name="show")
@click.option("--field", "-f", type=str, default=None, help="Show only this field")
@click.pass_context
def show(ctx: click.Context, field: Optional[str]):
    """Display the current configuration."""
    cfg = load_config(ctx)
    values = cfg.model_dump(mode="json")

    if field:
        if field not in values:
            click.echo(f"Error: Field '{field}' does not exist", err=True)
            ctx.exit(1)
        click.echo(f"{field}: {values[field]}")
        return

    click.echo(f"\nConfiguration ({config_path(ctx) or DEFAULT_CONFIG_PATH}):")
    click.echo("=" * 60)
    for key, value in values.items():
        click.echo(f"  {key}: {value}")
    click.echo("")


@config.command(name="set")
@click.argument("field")
@click.argument("value")
@click.pass_context
def set_value(ctx: click.Context, field: str, value: str):
    """Set FIELD to VALUE and save (use "none" to clear optional fields)."""
    cfg = load_config(ctx)
    if field not in AppConfig.model_fields:
        click.echo(f"Error: Field '{field}' does not exist", err=True)
        click.echo(f"Hint: Available fields: {', '.join(AppConfig.model_fields)}", err=True)
        ctx.exit(1)

    data = cfg.model_dump()
    data[field] = None if value.strip().lower() in _NONE_VALUES else value

    try:
        updated = AppConfig.model_validate(data)
    except ValidationError as e:
        fail(ConfigValidationError(field, value, e.errors()[0]["msg"]))

    path = config_path(ctx) or DEFAULT_CONFIG_PATH
    try:
        updated.save(path)
    except OSError as e:
        fail(e)

    logger.info(f"Config '{field}' set to {getattr(updated, field)!r}")
    click.echo(f"✓ {field} = {getattr(updated, field)}")
    click.echo(f"\nConfiguration saved to {path}")


@config.command(name="reset")
@click.option("--field", "-f", type=str, default=None, help="Reset only this field")
@click.confirmation_option(prompt="Reset configuration to defaults?")
@click.pass_context
def reset(ctx: click.Context, field: Optional[str]):
    """Reset the configuration (or one field) to defaults."""
    path = config_path(ctx) or DEFAULT_CONFIG_PATH
    defaults = AppConfig()

    try:
        if field:
            if field not in AppConfig.model_fields:
                click.echo(f"Error: Field '{field}' does not exist", err=True)
                ctx.exit(1)
            cfg = load_config(ctx).model_copy(update={field: getattr(defaults, field)})
            cfg.save(path)
            click.echo(f"✓ Reset {field} to default: {getattr(defaults, field)}")
        else:
            defaults.save(path)
            click.echo("✓ Reset all fields to defaults")
    except (SoundboardError, OSError) as e:
        fail(e)

    click.echo(f"  Configuration saved to {path}")
