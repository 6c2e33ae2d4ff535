"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from .commands import audio_group, check, config, favorites_group, list_sounds, play, share

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".soundboard" / "logs"


def _log_path(debug: bool, log_file: Optional[Path]) -> Path:
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "soundboard-debug.log"
    return LOG_DIR / "soundboard.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins for custom log files
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = _log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version="0.1.0", prog_name="soundboard")
@click.option(
    '--config',
    'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.soundboard/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./soundboard-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Soundboard - play short sound clips, keep favorites and share them.

    Without a command the terminal UI starts.

    \b
    Examples:
      # Start the terminal UI
      soundboard

      # List all sounds
      soundboard list

      # Play one sound
      soundboard play spongeBob Wambo

      # Mark a favorite
      soundboard favorites add drawnTogether AUA

      # Find missing sound files
      soundboard check

      # Enable debug logging
      soundboard --debug
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file

    log_path = setup_logging(verbose, debug, log_file, log_level)

    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports keep subcommands free of the TUI stack
    from soundboard.app import SoundboardApp
    from soundboard.models import AppConfig
    from soundboard.tui import SoundboardTUI

    logger.info("Starting Soundboard")

    try:
        config_obj = AppConfig.load_or_default(config_file)
        app = SoundboardApp(config_obj)
        SoundboardTUI(app).run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        from soundboard.exceptions import format_error_for_display

        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        click.echo("For logging options, run: soundboard --help", err=True)
        sys.exit(1)


cli.add_command(list_sounds)
cli.add_command(play)
cli.add_command(share)
cli.add_command(check)
cli.add_command(favorites_group)
cli.add_command(audio_group)
cli.add_command(config)

if __name__ == "__main__":
    cli()
