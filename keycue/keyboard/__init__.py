"""Key vocabulary, ordering, and display registry."""

from .descriptors import KEY_NAMES, MODIFIER_KEYS, KeyDescriptor, descriptors_from_key_strokes
from .priority import MODIFIER_PRIORITY, ONE_KEY_STROKE_PRIORITY, sort_keys, sort_modifiers
from .registry import UnregisteredKeyError, get_builder, get_label

__all__ = [
    "KEY_NAMES",
    "MODIFIER_KEYS",
    "MODIFIER_PRIORITY",
    "ONE_KEY_STROKE_PRIORITY",
    "KeyDescriptor",
    "UnregisteredKeyError",
    "descriptors_from_key_strokes",
    "get_builder",
    "get_label",
    "sort_keys",
    "sort_modifiers",
]
