"""Audio command implementations."""

import click

from soundboard.audio.device import device_name, get_default_device, list_output_devices

from ..context import load_config


@click.group(name="audio")
def audio_group():
    """Audio device commands."""
    pass


def _display_device_details(info: dict, indent: str = "    ") -> None:
    """Display device details with specified indentation."""
    click.echo(f"{indent}Channels: {info['max_output_channels']} out")
    click.echo(f"{indent}Sample Rate: {info['default_samplerate']} Hz")
    if 'default_low_output_latency' in info:
        latency_ms = info['default_low_output_latency'] * 1000
        click.echo(f"{indent}Latency: {latency_ms:.1f} ms")


@audio_group.command(name="list")
@click.option("--detailed", is_flag=True, help="Show detailed device information")
@click.pass_context
def list_audio(ctx: click.Context, detailed: bool):
    """List available audio output devices."""
    devices = list_output_devices()
    default_device_id = get_default_device()

    if not devices:
        click.echo("No audio output devices found.")
        return

    click.echo("Available audio output devices:\n")
    for device_id, name, host_api, info in devices:
        suffix = "  [Default]" if device_id == default_device_id else ""
        click.echo(f"[{device_id}] {name}{suffix}")
        click.echo(f"    Host API: {host_api}")
        if detailed:
            _display_device_details(info)
        click.echo()

    config = load_config(ctx)
    click.echo(f"Configured device: {device_name(config.default_audio_device)}")
    click.echo("Select a device with: soundboard config set default_audio_device <ID>")
