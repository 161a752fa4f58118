"""Turn key descriptors into a natural-language sentence for the help dialog.

The builder recognizes the shortcut patterns used throughout the help content
(single keys, modifier combinations, arrow key clusters, WASD groups, ...) and
falls back to a plain list of key labels when no cluster wording exists.

The sentence is returned as a :class:`~keycue.reactive.DerivedProperty`. Every
text value that could appear in it is collected up front and declared as a
dependency, so a language switch updates the sentence without rebuilding it.
Descriptors are assumed not to change for the lifetime of the description.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .. import strings
from ..keyboard.descriptors import KeyDescriptor
from ..keyboard.priority import sort_keys, sort_modifiers
from ..keyboard.registry import get_label
from ..reactive import DerivedProperty, Property, ReadOnlyProperty
from .grouping import ModifierGroup, group_descriptors, partition_group
from .hotkey_sets import DEFAULT_VARIANT, get_definition

LOGGER = logging.getLogger(__name__)

TextSource = Union[str, ReadOnlyProperty]

# Modifier wording that differs from the key cap label ("Control", not "Ctrl").
MODIFIER_LABEL_OVERRIDES: Dict[str, ReadOnlyProperty] = {
    "ctrl": strings.CONTROL,
    "alt": strings.ALT_OR_OPTION,
    "shift": strings.KEY_LABELS["shift"],
    "meta": strings.META_OR_COMMAND,
}

# Formatting text that any sentence may use.
FORMATTING_STRINGS = (
    strings.OR,
    strings.COMMA_SPACE,
    strings.SPACE_PLUS_SPACE,
    strings.TWO_ITEM_LIST,
    strings.LIST_WITH_FINAL_ITEM,
    strings.ACTION_WITH_KEYS,
    strings.ACTION_ONLY,
    strings.MODIFIERS_PLUS_KEYS,
    strings.SINGLE_KEY,
    strings.MULTIPLE_KEYS,
)


def describe(
    action_text: TextSource,
    descriptors: Iterable[KeyDescriptor],
    variant: str = DEFAULT_VARIANT,
) -> DerivedProperty:
    """Create the observable help sentence, e.g. "Move with Arrow keys"."""

    action = action_text if isinstance(action_text, ReadOnlyProperty) else Property(action_text)
    descriptors = list(descriptors)
    dependencies = collect_dependencies(action, descriptors, variant)
    return DerivedProperty(
        dependencies,
        lambda: create_description_string(action.value, descriptors, variant),
    )


def create_description_string(
    action_string: str,
    descriptors: Sequence[KeyDescriptor],
    variant: str = DEFAULT_VARIANT,
) -> str:
    trimmed_action = action_string.strip()
    if not trimmed_action:
        return ""

    key_phrase = describe_descriptors(descriptors, variant)
    if not key_phrase:
        return strings.fill_in(strings.ACTION_ONLY.value, action=trimmed_action)
    return strings.fill_in(strings.ACTION_WITH_KEYS.value, action=trimmed_action, keys=key_phrase)


def describe_descriptors(descriptors: Sequence[KeyDescriptor], variant: str = DEFAULT_VARIANT) -> str:
    return join_list(describe_clauses(descriptors, variant))


def describe_clauses(descriptors: Sequence[KeyDescriptor], variant: str = DEFAULT_VARIANT) -> List[str]:
    """One clause per modifier group, before the clauses are joined."""

    return [describe_group(group, variant) for group in group_descriptors(descriptors)]


def describe_group(group: ModifierGroup, variant: str = DEFAULT_VARIANT) -> str:
    modifier_description = describe_modifiers(group.modifiers)
    partitions, _layout = partition_group(group, variant)

    if modifier_description and len(partitions) > 1:
        return join_list(
            [_combine(modifier_description, describe_key_set(partition, variant)) for partition in partitions]
        )

    return _combine(modifier_description, describe_key_set(group.keys, variant))


def _combine(modifier_description: str, key_description: str) -> str:
    if modifier_description and key_description:
        return strings.fill_in(
            strings.MODIFIERS_PLUS_KEYS.value, modifiers=modifier_description, keys=key_description
        )
    return modifier_description or key_description


def describe_modifiers(modifiers: Iterable[str]) -> str:
    """Text such as "Control plus Shift" for a modifier combination."""

    labels = [modifier_label(modifier).value for modifier in sort_modifiers(modifiers)]
    return strings.SPACE_PLUS_SPACE.value.join(labels)


def modifier_label(modifier: str) -> ReadOnlyProperty:
    override = MODIFIER_LABEL_OVERRIDES.get(modifier)
    if override is not None:
        return override
    return get_label(modifier)


def describe_key_set(keys: Iterable[str], variant: str = DEFAULT_VARIANT) -> str:
    normalized_keys = sort_keys(keys)
    if not normalized_keys:
        return ""

    definition = get_definition(normalized_keys, variant)
    if definition is not None and definition.phrase is not None:
        return definition.phrase.value

    LOGGER.debug("No phrase for key set %s; listing key labels", normalized_keys)
    labels = [get_label(key).value for key in normalized_keys]
    if len(labels) == 1:
        return strings.fill_in(strings.SINGLE_KEY.value, key=labels[0])
    return strings.fill_in(strings.MULTIPLE_KEYS.value, keys=join_list(labels))


def join_list(items: Sequence[str], conjunction: Optional[ReadOnlyProperty] = None) -> str:
    """Join items as "A", "A or B", or "A, B, or C".

    ``conjunction`` defaults to the localized "or"; pass ``strings.AND`` for
    enumerations where every item applies.
    """

    word = (conjunction or strings.OR).value
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return strings.fill_in(
            strings.TWO_ITEM_LIST.value, first=items[0], conjunction=word, second=items[1]
        )
    return strings.fill_in(
        strings.LIST_WITH_FINAL_ITEM.value,
        items=strings.COMMA_SPACE.value.join(items[:-1]),
        conjunction=word,
        last=items[-1],
    )


def collect_dependencies(
    action: ReadOnlyProperty,
    descriptors: Sequence[KeyDescriptor],
    variant: str = DEFAULT_VARIANT,
) -> List[ReadOnlyProperty]:
    """Every text value the sentence for ``descriptors`` could read.

    Has no side effects. Raises :class:`~keycue.keyboard.registry.UnregisteredKeyError`
    for keys without a label, before anything is computed.
    """

    dependencies: Dict[int, ReadOnlyProperty] = {id(action): action}

    def _add(prop: Optional[ReadOnlyProperty]) -> None:
        if prop is not None:
            dependencies.setdefault(id(prop), prop)

    for group in group_descriptors(descriptors):
        for modifier in group.modifiers:
            _add(modifier_label(modifier))
        for key in group.keys:
            _add(get_label(key))

        partitions, _layout = partition_group(group, variant)
        for keys in [group.keys, *partitions]:
            definition = get_definition(sort_keys(keys), variant)
            if definition is not None:
                _add(definition.phrase)

    for prop in FORMATTING_STRINGS:
        _add(prop)
    return list(dependencies.values())


__all__ = [
    "MODIFIER_LABEL_OVERRIDES",
    "collect_dependencies",
    "create_description_string",
    "describe",
    "describe_clauses",
    "describe_descriptors",
    "describe_group",
    "describe_key_set",
    "describe_modifiers",
    "join_list",
    "modifier_label",
]
