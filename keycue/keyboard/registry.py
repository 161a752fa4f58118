"""Label and key-cap builder for every canonical key.

Labels and builders live side by side so sentences and icons cannot drift
apart. Looking up a key that is not listed here is a programming error and
raises :class:`UnregisteredKeyError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping

from .. import strings
from ..reactive import ReadOnlyProperty
from .descriptors import KEY_NAMES, MODIFIER_KEYS
from .key_nodes import KeyCap, arrow_key, letter_key, number_key, text_key

KeyBuilder = Callable[[], KeyCap]


class UnregisteredKeyError(LookupError):
    """A key name was used that has no label or key-cap builder."""


@dataclass(frozen=True, eq=False)
class KeyDisplayDefinition:
    label: ReadOnlyProperty
    build: KeyBuilder


def _cap_label(name: str) -> ReadOnlyProperty:
    return strings.KEY_CAP_LABELS.get(name, strings.KEY_LABELS[name])


def _text_entry(name: str) -> KeyDisplayDefinition:
    label = strings.KEY_LABELS[name]
    cap = _cap_label(name)
    return KeyDisplayDefinition(label=label, build=lambda: text_key(cap))


def _letter_entry(letter: str) -> KeyDisplayDefinition:
    label = strings.KEY_LABELS[letter]
    return KeyDisplayDefinition(label=label, build=lambda: letter_key(label))


def _number_entry(value: int) -> KeyDisplayDefinition:
    return KeyDisplayDefinition(label=strings.KEY_LABELS[str(value)], build=lambda: number_key(value))


_REGISTRY: Dict[str, KeyDisplayDefinition] = {
    "shift": _text_entry("shift"),
    "ctrl": _text_entry("ctrl"),
    "alt": KeyDisplayDefinition(
        label=strings.ALT_OR_OPTION, build=lambda: text_key(strings.ALT_OR_OPTION)
    ),
    "meta": KeyDisplayDefinition(
        label=strings.META_OR_COMMAND, build=lambda: text_key(strings.META_OR_COMMAND)
    ),
    "shiftLeft": _text_entry("shiftLeft"),
    "shiftRight": _text_entry("shiftRight"),
    "ctrlLeft": _text_entry("ctrlLeft"),
    "ctrlRight": _text_entry("ctrlRight"),
    "altLeft": _text_entry("altLeft"),
    "altRight": _text_entry("altRight"),
    "metaLeft": _text_entry("metaLeft"),
    "metaRight": _text_entry("metaRight"),
    "escape": _text_entry("escape"),
    "arrowLeft": KeyDisplayDefinition(label=strings.KEY_LABELS["arrowLeft"], build=lambda: arrow_key("left")),
    "arrowRight": KeyDisplayDefinition(label=strings.KEY_LABELS["arrowRight"], build=lambda: arrow_key("right")),
    "arrowUp": KeyDisplayDefinition(label=strings.KEY_LABELS["arrowUp"], build=lambda: arrow_key("up")),
    "arrowDown": KeyDisplayDefinition(label=strings.KEY_LABELS["arrowDown"], build=lambda: arrow_key("down")),
    "pageUp": _text_entry("pageUp"),
    "pageDown": _text_entry("pageDown"),
    "home": _text_entry("home"),
    "end": _text_entry("end"),
    "space": _text_entry("space"),
    "tab": _text_entry("tab"),
    "enter": _text_entry("enter"),
    "backspace": _text_entry("backspace"),
    "delete": _text_entry("delete"),
}
_REGISTRY.update({letter: _letter_entry(letter) for letter in "abcdefghijklmnopqrstuvwxyz"})
_REGISTRY.update({str(value): _number_entry(value) for value in range(10)})

KEY_DISPLAY_REGISTRY: Mapping[str, KeyDisplayDefinition] = MappingProxyType(_REGISTRY)


def _definition(key: str, what: str) -> KeyDisplayDefinition:
    try:
        return KEY_DISPLAY_REGISTRY[key]
    except KeyError as exc:
        raise UnregisteredKeyError(
            f'No {what} configured for key "{key}". Please add it to the key display registry.'
        ) from exc


def get_label(key: str) -> ReadOnlyProperty:
    """Return the localized label for ``key``."""

    return _definition(key, "label").label


def get_builder(key: str) -> KeyBuilder:
    """Return the function that builds a key cap for ``key``."""

    return _definition(key, "key builder").build


def is_registered(key: str) -> bool:
    return key in KEY_DISPLAY_REGISTRY


def validate_key_vocabulary() -> None:
    """Raise ``UnregisteredKeyError`` if a known key or modifier has no display entry."""

    missing = [key for key in (*KEY_NAMES, *MODIFIER_KEYS) if not is_registered(key)]
    if missing:
        raise UnregisteredKeyError(f"Keys missing from the display registry: {', '.join(missing)}")


validate_key_vocabulary()


__all__ = [
    "KEY_DISPLAY_REGISTRY",
    "KeyDisplayDefinition",
    "UnregisteredKeyError",
    "get_builder",
    "get_label",
    "is_registered",
    "validate_key_vocabulary",
]
