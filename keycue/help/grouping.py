"""Group key descriptors that share the same modifier combination."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from ..keyboard.descriptors import KeyDescriptor
from ..keyboard.priority import sort_keys, sort_modifiers
from .hotkey_sets import (
    DEFAULT_VARIANT,
    PartitionLayout,
    partition_key_set_for_modifiers,
    partition_layout,
)


@dataclass
class ModifierGroup:
    """Keys that are all pressed with exactly ``modifiers``."""

    modifiers: Tuple[str, ...]
    keys: List[str] = field(default_factory=list)


def group_descriptors(descriptors: Iterable[KeyDescriptor]) -> List[ModifierGroup]:
    """Group ``descriptors`` by modifier set, in order of first appearance.

    The phrase builder and the icon composer both start from this grouping, so
    a sentence always has one clause per icon group.
    """

    groups: Dict[str, ModifierGroup] = {}
    for descriptor in descriptors:
        modifiers = tuple(sort_modifiers(descriptor.modifier_keys))
        group_id = "|".join(modifiers)
        group = groups.get(group_id)
        if group is None:
            group = groups[group_id] = ModifierGroup(modifiers=modifiers)
        if descriptor.key not in group.keys:
            group.keys.append(descriptor.key)
    return list(groups.values())


def partition_group(
    group: ModifierGroup, variant: str = DEFAULT_VARIANT
) -> Tuple[List[List[str]], PartitionLayout]:
    """Return the key partitions for ``group`` and how to lay them out.

    Keys only get split when they share a modifier; without modifiers the whole
    key set is a single partition.
    """

    keys = sort_keys(group.keys)
    if not group.modifiers:
        return [keys], "inline"
    partitions = partition_key_set_for_modifiers(keys, variant)
    if len(partitions) < 2:
        return partitions, "inline"
    return partitions, partition_layout(keys, variant)


__all__ = ["ModifierGroup", "group_descriptors", "partition_group"]
