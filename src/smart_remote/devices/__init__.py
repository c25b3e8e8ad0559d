"""Receivers controlled by the remote."""

from .interfaces import Device
from .smart_light import InvalidBrightnessError, SmartLight, validate_brightness
from .stereo import Stereo
from .tv import TV

__all__ = [
    "Device",
    "InvalidBrightnessError",
    "SmartLight",
    "Stereo",
    "TV",
    "validate_brightness",
]
