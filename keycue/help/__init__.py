"""Keyboard help: hotkey sentences and icons built from key descriptors."""

from .description import describe, describe_clauses, join_list
from .grouping import ModifierGroup, group_descriptors
from .hotkey_sets import (
    DEFAULT_VARIANT,
    PAIRED_VARIANT,
    HotkeySetDefinitionEntry,
    canonical_id,
    get_definition,
    partition_key_set_for_modifiers,
)
from .icon_composer import IconGroupData, build_icon_data, compose_icon

__all__ = [
    "DEFAULT_VARIANT",
    "PAIRED_VARIANT",
    "HotkeySetDefinitionEntry",
    "IconGroupData",
    "ModifierGroup",
    "build_icon_data",
    "canonical_id",
    "compose_icon",
    "describe",
    "describe_clauses",
    "get_definition",
    "group_descriptors",
    "join_list",
    "partition_key_set_for_modifiers",
]
