"""Hotkey descriptions and key-cap icons for keyboard help content."""

from .help import build_icon_data, compose_icon, describe
from .keyboard import KeyDescriptor, UnregisteredKeyError, descriptors_from_key_strokes

__version__ = "0.1.0"

__all__ = [
    "KeyDescriptor",
    "UnregisteredKeyError",
    "build_icon_data",
    "compose_icon",
    "describe",
    "descriptors_from_key_strokes",
]
