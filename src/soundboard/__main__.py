"""Main entry point for soundboard."""

from soundboard.cli.main import cli

if __name__ == "__main__":
    cli()
