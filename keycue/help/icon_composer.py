"""Build key-cap icons from key descriptors.

The composer mirrors :mod:`keycue.help.description`: both start from
:func:`~keycue.help.grouping.group_descriptors` and split modifier groups with
the same partitions, so each clause of the sentence has one icon group.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, List, Sequence, Tuple

from ..keyboard.descriptors import KeyDescriptor
from ..keyboard.key_nodes import IconNode, IconRow, IconStack, OrText
from ..keyboard.priority import sort_keys, sort_modifiers
from ..keyboard.registry import get_builder
from .grouping import ModifierGroup, group_descriptors, partition_group
from .hotkey_sets import DEFAULT_VARIANT, HOTKEY_SET_ENTRIES, PartitionLayout, get_definition
from .icon_factory import ICON_FACTORIES, icon_or_icon, icon_plus_icon

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class IconGroupData:
    """The alternative icons for one modifier group and how to arrange them."""

    alternatives: Tuple[IconNode, ...]
    layout: PartitionLayout = "inline"


def build_icon_data(
    descriptors: Iterable[KeyDescriptor], variant: str = DEFAULT_VARIANT
) -> List[IconGroupData]:
    """One :class:`IconGroupData` per modifier group, in descriptor order.

    Useful when the caller wants to arrange the alternatives itself, for
    example to align a label with the first alternative.
    """

    return [_build_group_data(group, variant) for group in group_descriptors(descriptors)]


def compose_icon(descriptors: Iterable[KeyDescriptor], variant: str = DEFAULT_VARIANT) -> IconNode:
    """A single icon tree for all descriptors, groups joined with "or"."""

    return compose_icon_from_data(build_icon_data(descriptors, variant))


def compose_icon_from_data(icon_data: Sequence[IconGroupData]) -> IconNode:
    group_icons = [compose_group_icon(data) for data in icon_data]
    if not group_icons:
        return IconRow()
    return _or_chain(group_icons)


def compose_group_icon(data: IconGroupData) -> IconNode:
    """Arrange the alternatives of one group.

    ``inline`` chains them in one row with "or" between each. ``stacked`` puts
    each alternative on its own row, ending every row but the last with "or".
    """

    alternatives = list(data.alternatives)
    if len(alternatives) == 1:
        return alternatives[0]
    if data.layout == "stacked":
        rows: List[IconNode] = [IconRow(children=(alternative, OrText())) for alternative in alternatives[:-1]]
        rows.append(alternatives[-1])
        return IconStack(children=tuple(rows))
    return _or_chain(alternatives)


def build_key_set_icon(keys: Iterable[str], variant: str = DEFAULT_VARIANT) -> IconNode:
    """The canned icon for a known key set, otherwise the keys joined with "or"."""

    normalized_keys = sort_keys(keys)
    definition = get_definition(normalized_keys, variant)
    if definition is not None and definition.icon_factory is not None:
        return ICON_FACTORIES[definition.icon_factory]()

    LOGGER.debug("No canned icon for key set %s; chaining key caps", normalized_keys)
    return _or_chain([get_builder(key)() for key in normalized_keys])


def build_modifiers_icon(modifiers: Iterable[str]) -> IconNode:
    """Modifier key caps joined with "+"."""

    caps = [get_builder(modifier)() for modifier in sort_modifiers(modifiers)]
    return reduce(icon_plus_icon, caps)


def _build_group_data(group: ModifierGroup, variant: str) -> IconGroupData:
    partitions, layout = partition_group(group, variant)
    if not group.modifiers:
        return IconGroupData(alternatives=(build_key_set_icon(group.keys, variant),), layout=layout)

    alternatives = tuple(
        icon_plus_icon(build_modifiers_icon(group.modifiers), build_key_set_icon(partition, variant))
        for partition in partitions
    )
    return IconGroupData(alternatives=alternatives, layout=layout)


def _or_chain(icons: Sequence[IconNode]) -> IconNode:
    return reduce(icon_or_icon, icons)


def validate_icon_factories() -> None:
    """Raise ``LookupError`` if a hotkey set names an icon that does not exist."""

    missing = sorted(
        {
            entry.icon_factory
            for entry in HOTKEY_SET_ENTRIES
            if entry.icon_factory and entry.icon_factory not in ICON_FACTORIES
        }
    )
    if missing:
        raise LookupError(f"Unknown icon factories: {', '.join(missing)}")


validate_icon_factories()


__all__ = [
    "IconGroupData",
    "build_icon_data",
    "build_key_set_icon",
    "build_modifiers_icon",
    "compose_group_icon",
    "compose_icon",
    "compose_icon_from_data",
    "validate_icon_factories",
]
