"""Audio output device queries."""

import logging
from typing import Optional

import sounddevice as sd

logger = logging.getLogger(__name__)


def list_output_devices() -> list[tuple[int, str, str, dict]]:
    """
    List all audio devices with at least one output channel.

    Returns:
        List of tuples (device_id, device_name, host_api_name, device_info)
    """
    devices = sd.query_devices()
    hostapis = sd.query_hostapis()

    return [
        (i, device['name'], hostapis[device['hostapi']]['name'], device)
        for i, device in enumerate(devices)
        if device['max_output_channels'] > 0
    ]


def get_default_device() -> Optional[int]:
    """Default output device ID, or None when there is none."""
    device = sd.default.device[1]  # [input, output]
    return device if device is not None and device >= 0 else None


def device_name(device_id: Optional[int]) -> str:
    """Name of an output device (the default device when ``device_id`` is None)."""
    try:
        if device_id is not None:
            return sd.query_devices(device_id)['name']
        default = get_default_device()
        if default is not None:
            return f"{sd.query_devices(default)['name']} (default)"
        return "Default Device"
    except Exception as e:
        logger.debug(f"Could not query device {device_id}: {e}")
        return "Unknown Device"
