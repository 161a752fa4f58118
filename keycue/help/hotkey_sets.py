"""Shared definitions for well-known key clusters.

Sentences and icons both look clusters up here, which keeps them in sync: when
a group of keys such as the four arrow keys or WASD is recognized, the phrase
builder uses the cluster phrase and the icon composer uses the matching canned
icon instead of listing the keys one by one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Literal, Mapping, Optional, Sequence, Tuple

from .. import strings
from ..keyboard.priority import sort_keys
from ..reactive import ReadOnlyProperty

LOGGER = logging.getLogger(__name__)

PartitionLayout = Literal["inline", "stacked"]

DEFAULT_VARIANT = "default"
PAIRED_VARIANT = "paired"

KEY_SEPARATOR = "|"
VARIANT_SEPARATOR = "::"

ARROW_KEYS = ("arrowLeft", "arrowRight", "arrowUp", "arrowDown")
LEFT_RIGHT_ARROW_KEYS = ("arrowLeft", "arrowRight")
UP_DOWN_ARROW_KEYS = ("arrowUp", "arrowDown")
WASD_KEYS = ("w", "a", "s", "d")
AD_KEYS = ("a", "d")
WS_KEYS = ("w", "s")
ARROW_OR_WASD_KEYS = ARROW_KEYS + WASD_KEYS
LEFT_RIGHT_OR_AD_KEYS = LEFT_RIGHT_ARROW_KEYS + AD_KEYS
UP_DOWN_OR_WS_KEYS = UP_DOWN_ARROW_KEYS + WS_KEYS
PAGE_UP_PAGE_DOWN_KEYS = ("pageUp", "pageDown")
SPACE_OR_ENTER_KEYS = ("space", "enter")


@dataclass(frozen=True)
class HotkeySetDefinitionEntry:
    """How a cluster of keys is described in text and drawn as an icon.

    ``partition_layout`` controls how the cluster is arranged when it is split
    around a shared modifier::

        inline   Shift + [A] or Shift + [D]
        stacked  Shift + [A] or
                 Shift + [D]

    ``partition_families`` are key subsets that are pulled out first when this
    variant is split around a modifier.
    """

    keys: Tuple[str, ...]
    variant: str = DEFAULT_VARIANT
    phrase: Optional[ReadOnlyProperty] = None
    icon_factory: Optional[str] = None
    partition_layout: PartitionLayout = "inline"
    partition_families: Tuple[Tuple[str, ...], ...] = ()

    def __post_init__(self) -> None:
        if self.partition_layout not in ("inline", "stacked"):
            raise ValueError(f"Unknown partition layout '{self.partition_layout}'")
        for family in self.partition_families:
            missing = [key for key in family if key not in self.keys]
            if missing:
                raise ValueError(f"Partition family {family} is not a subset of {self.keys}")


HOTKEY_SET_ENTRIES: Tuple[HotkeySetDefinitionEntry, ...] = (
    HotkeySetDefinitionEntry(
        keys=ARROW_OR_WASD_KEYS,
        phrase=strings.ARROW_OR_WASD,
        icon_factory="arrow_or_wasd_keys_row_icon",
        partition_layout="stacked",
    ),
    HotkeySetDefinitionEntry(
        keys=ARROW_OR_WASD_KEYS,
        variant=PAIRED_VARIANT,
        phrase=strings.ARROW_OR_WASD,
        icon_factory="arrow_or_wasd_keys_row_icon",
        partition_layout="stacked",
        partition_families=(LEFT_RIGHT_ARROW_KEYS, UP_DOWN_ARROW_KEYS, AD_KEYS, WS_KEYS),
    ),
    HotkeySetDefinitionEntry(
        keys=ARROW_KEYS,
        phrase=strings.ARROW_KEYS,
        icon_factory="arrow_keys_row_icon",
    ),
    HotkeySetDefinitionEntry(
        keys=ARROW_KEYS,
        variant=PAIRED_VARIANT,
        phrase=strings.LEFT_RIGHT_OR_UP_DOWN,
        icon_factory="left_right_or_up_down_keys_row_icon",
        partition_layout="stacked",
        partition_families=(LEFT_RIGHT_ARROW_KEYS, UP_DOWN_ARROW_KEYS),
    ),
    HotkeySetDefinitionEntry(
        keys=LEFT_RIGHT_ARROW_KEYS,
        phrase=strings.LEFT_RIGHT_ARROWS,
        icon_factory="left_right_arrow_keys_row_icon",
    ),
    HotkeySetDefinitionEntry(
        keys=UP_DOWN_ARROW_KEYS,
        phrase=strings.UP_DOWN_ARROWS,
        icon_factory="up_down_arrow_keys_row_icon",
    ),
    HotkeySetDefinitionEntry(
        keys=WASD_KEYS,
        phrase=strings.WASD,
        icon_factory="wasd_row_icon",
    ),
    HotkeySetDefinitionEntry(
        keys=WASD_KEYS,
        variant=PAIRED_VARIANT,
        phrase=strings.AD_OR_WS,
        icon_factory="a_d_or_w_s_keys_row_icon",
        partition_layout="stacked",
        partition_families=(AD_KEYS, WS_KEYS),
    ),
    HotkeySetDefinitionEntry(
        keys=AD_KEYS,
        phrase=strings.AD,
        icon_factory="a_d_keys_row_icon",
    ),
    HotkeySetDefinitionEntry(
        keys=WS_KEYS,
        phrase=strings.WS,
        icon_factory="w_s_keys_row_icon",
    ),
    HotkeySetDefinitionEntry(
        keys=LEFT_RIGHT_OR_AD_KEYS,
        phrase=strings.LEFT_RIGHT_OR_AD,
        icon_factory="left_right_or_a_d_keys_row_icon",
        partition_layout="stacked",
    ),
    HotkeySetDefinitionEntry(
        keys=UP_DOWN_OR_WS_KEYS,
        phrase=strings.UP_DOWN_OR_WS,
        icon_factory="up_down_or_w_s_keys_row_icon",
        partition_layout="stacked",
    ),
    HotkeySetDefinitionEntry(
        keys=PAGE_UP_PAGE_DOWN_KEYS,
        phrase=strings.PAGE_UP_PAGE_DOWN,
        icon_factory="page_up_page_down_row_icon",
    ),
    HotkeySetDefinitionEntry(
        keys=SPACE_OR_ENTER_KEYS,
        icon_factory="space_or_enter",
    ),
)

# Families that stay together when a key set is split around a modifier.
MODIFIER_SPLIT_KEY_FAMILIES: Tuple[Tuple[str, ...], ...] = (
    ARROW_KEYS,
    WASD_KEYS,
    LEFT_RIGHT_ARROW_KEYS,
    AD_KEYS,
    UP_DOWN_ARROW_KEYS,
    WS_KEYS,
)


def canonical_id(keys: Iterable[str], variant: str = DEFAULT_VARIANT) -> str:
    """Stable lookup identifier for a key set, independent of key order."""

    return KEY_SEPARATOR.join(sort_keys(keys)) + VARIANT_SEPARATOR + variant


def _build_definitions(
    entries: Sequence[HotkeySetDefinitionEntry],
) -> Mapping[str, HotkeySetDefinitionEntry]:
    definitions = {}
    for entry in entries:
        identifier = canonical_id(entry.keys, entry.variant)
        if identifier in definitions:
            raise ValueError(f"Duplicate hotkey set definition '{identifier}'")
        definitions[identifier] = entry
    return MappingProxyType(definitions)


HOTKEY_SET_DEFINITIONS: Mapping[str, HotkeySetDefinitionEntry] = _build_definitions(HOTKEY_SET_ENTRIES)


def get_definition(keys: Iterable[str], variant: str = DEFAULT_VARIANT) -> Optional[HotkeySetDefinitionEntry]:
    """Return the definition for ``keys``, falling back to the default variant.

    ``None`` is a normal result: most key combinations have no special wording.
    """

    keys = tuple(keys)
    definition = HOTKEY_SET_DEFINITIONS.get(canonical_id(keys, variant))
    if definition is None and variant != DEFAULT_VARIANT:
        LOGGER.debug("No '%s' variant for %s; using the default variant", variant, keys)
        definition = HOTKEY_SET_DEFINITIONS.get(canonical_id(keys, DEFAULT_VARIANT))
    return definition


def partition_layout(keys: Iterable[str], variant: str = DEFAULT_VARIANT) -> PartitionLayout:
    definition = get_definition(keys, variant)
    return definition.partition_layout if definition else "inline"


def partition_key_set_for_modifiers(
    sorted_keys: Sequence[str], variant: str = DEFAULT_VARIANT
) -> List[List[str]]:
    """Split a key set into groups that are drawn beside a shared modifier.

    Example: ``["arrowLeft", "arrowRight", "space"]`` becomes
    ``[["arrowLeft", "arrowRight"], ["space"]]`` so the arrow pair keeps its
    cluster wording. A set that matches no family, or exactly one family with
    nothing left over, is returned whole.
    """

    sorted_keys = sort_keys(sorted_keys)
    if not sorted_keys:
        return []

    remaining = list(sorted_keys)
    partitions: List[List[str]] = []

    definition = get_definition(sorted_keys, variant)
    families = (definition.partition_families if definition else ()) + MODIFIER_SPLIT_KEY_FAMILIES

    for family in families:
        if all(key in remaining for key in family):
            partitions.append(list(family))
            remaining = [key for key in remaining if key not in family]

    matched_count = len(partitions)
    if matched_count == 0 or (matched_count == 1 and not remaining):
        return [list(sorted_keys)]

    if remaining:
        partitions.append(sort_keys(remaining))
    return partitions


__all__ = [
    "DEFAULT_VARIANT",
    "HOTKEY_SET_DEFINITIONS",
    "HOTKEY_SET_ENTRIES",
    "MODIFIER_SPLIT_KEY_FAMILIES",
    "PAIRED_VARIANT",
    "HotkeySetDefinitionEntry",
    "PartitionLayout",
    "canonical_id",
    "get_definition",
    "partition_key_set_for_modifiers",
    "partition_layout",
]
