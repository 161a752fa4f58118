"""Default English text for key labels, key-set phrases, and sentence patterns.

Every value is an observable :class:`~keycue.reactive.Property` registered in
:data:`STRINGS` under a dotted name, so translations (or tests) can replace the
text at runtime and anything derived from it recomputes.
"""

from __future__ import annotations

import re
import sys
from typing import Dict, Mapping

from .reactive import DerivedProperty, Property

STRINGS: Dict[str, Property] = {}


def _text(name: str, value: str) -> Property:
    prop = Property(value)
    STRINGS[name] = prop
    return prop


# Platform drives the alt/option and meta/command wording.
PLATFORM = _text("platform", "mac" if sys.platform == "darwin" else "other")

# Key labels used in sentences.
KEY_LABELS: Dict[str, Property] = {
    name: _text(f"key.{name}", label)
    for name, label in (
        ("arrowLeft", "Left Arrow"),
        ("arrowRight", "Right Arrow"),
        ("arrowUp", "Up Arrow"),
        ("arrowDown", "Down Arrow"),
        ("space", "Space"),
        ("enter", "Enter"),
        ("tab", "Tab"),
        ("escape", "Escape"),
        ("pageUp", "Page Up"),
        ("pageDown", "Page Down"),
        ("home", "Home"),
        ("end", "End"),
        ("delete", "Delete"),
        ("backspace", "Backspace"),
        ("ctrl", "Ctrl"),
        ("shift", "Shift"),
        ("alt", "Alt"),
        ("option", "Option"),
        ("meta", "Windows"),
        ("command", "Command"),
        ("ctrlLeft", "Left Control"),
        ("ctrlRight", "Right Control"),
        ("shiftLeft", "Left Shift"),
        ("shiftRight", "Right Shift"),
        ("altLeft", "Left Alt"),
        ("altRight", "Right Alt"),
        ("metaLeft", "Left Windows"),
        ("metaRight", "Right Windows"),
    )
}
KEY_LABELS.update({letter: _text(f"key.{letter}", letter.upper()) for letter in "abcdefghijklmnopqrstuvwxyz"})
KEY_LABELS.update({digit: _text(f"key.{digit}", digit) for digit in "0123456789"})

# Short text printed on key caps where the sentence label is too long.
KEY_CAP_LABELS: Dict[str, Property] = {
    name: _text(f"keyCap.{name}", label)
    for name, label in (
        ("escape", "Esc"),
        ("pageUp", "Pg Up"),
        ("pageDown", "Pg Dn"),
        ("delete", "Del"),
        ("ctrl", "Ctrl"),
        ("ctrlLeft", "Ctrl"),
        ("ctrlRight", "Ctrl"),
        ("shiftLeft", "Shift"),
        ("shiftRight", "Shift"),
        ("altLeft", "Alt"),
        ("altRight", "Alt"),
        ("metaLeft", "Win"),
        ("metaRight", "Win"),
    )
}

CONTROL = _text("modifier.control", "Control")

ALT_OR_OPTION = DerivedProperty(
    [PLATFORM, KEY_LABELS["alt"], KEY_LABELS["option"]],
    lambda: KEY_LABELS["option"].value if PLATFORM.value == "mac" else KEY_LABELS["alt"].value,
)
META_OR_COMMAND = DerivedProperty(
    [PLATFORM, KEY_LABELS["meta"], KEY_LABELS["command"]],
    lambda: KEY_LABELS["command"].value if PLATFORM.value == "mac" else KEY_LABELS["meta"].value,
)

# Phrases for well known key clusters.
ARROW_KEYS = _text("keySets.arrow", "Arrow keys")
LEFT_RIGHT_ARROWS = _text("keySets.leftRightArrows", "Left and Right Arrow keys")
UP_DOWN_ARROWS = _text("keySets.upDownArrows", "Up and Down Arrow keys")
WASD = _text("keySets.wasd", "W, A, S, or D")
AD = _text("keySets.ad", "A or D")
WS = _text("keySets.ws", "W or S")
ARROW_OR_WASD = _text("keySets.arrowOrWASD", "Arrow keys or W, A, S, or D")
LEFT_RIGHT_OR_AD = _text("keySets.leftRightOrAD", "Left and Right Arrow keys or A or D")
UP_DOWN_OR_WS = _text("keySets.upDownOrWS", "Up and Down Arrow keys or W or S")
LEFT_RIGHT_OR_UP_DOWN = _text("keySets.leftRightOrUpDown", "Left and Right Arrow keys or Up and Down Arrow keys")
AD_OR_WS = _text("keySets.adOrWS", "A or D, or W or S")
PAGE_UP_PAGE_DOWN = _text("keySets.pageUpPageDown", "Page Up or Page Down")

# List formatting.
OR = _text("listFormatting.or", "or")
AND = _text("listFormatting.and", "and")
COMMA_SPACE = _text("listFormatting.commaSpace", ", ")
SPACE_PLUS_SPACE = _text("listFormatting.spacePlusSpace", " plus ")
HYPHEN = _text("listFormatting.hyphen", "-")
TWO_ITEM_LIST = _text("listFormatting.twoItems", "{first} {conjunction} {second}")
LIST_WITH_FINAL_ITEM = _text("listFormatting.finalItem", "{items}, {conjunction} {last}")

# Sentence patterns.
ACTION_WITH_KEYS = _text("patterns.actionWithKeys", "{action} with {keys}")
ACTION_ONLY = _text("patterns.actionOnly", "{action}")
MODIFIERS_PLUS_KEYS = _text("patterns.modifiersPlusKeys", "{modifiers} plus {keys}")
SINGLE_KEY = _text("patterns.singleKey", "{key}")
MULTIPLE_KEYS = _text("patterns.multipleKeys", "{keys}")

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def fill_in(pattern: str, **values: str) -> str:
    """Replace ``{name}`` placeholders in ``pattern``.

    Placeholders without a value are left untouched so a bad translation shows
    up in the output instead of raising.
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, pattern)


def apply_overrides(overrides: Mapping[str, str]) -> None:
    """Replace registered text values by name."""

    unknown = sorted(name for name in overrides if name not in STRINGS)
    if unknown:
        raise KeyError(f"Unknown string names: {', '.join(unknown)}")
    for name, text in overrides.items():
        STRINGS[name].value = text


def snapshot() -> Dict[str, str]:
    return {name: prop.value for name, prop in STRINGS.items()}


def restore(values: Mapping[str, str]) -> None:
    for name, text in values.items():
        if name in STRINGS:
            STRINGS[name].value = text


__all__ = [
    "ACTION_ONLY",
    "ACTION_WITH_KEYS",
    "ALT_OR_OPTION",
    "AND",
    "COMMA_SPACE",
    "CONTROL",
    "KEY_CAP_LABELS",
    "KEY_LABELS",
    "LIST_WITH_FINAL_ITEM",
    "META_OR_COMMAND",
    "MODIFIERS_PLUS_KEYS",
    "MULTIPLE_KEYS",
    "OR",
    "PLATFORM",
    "SINGLE_KEY",
    "SPACE_PLUS_SPACE",
    "STRINGS",
    "TWO_ITEM_LIST",
    "apply_overrides",
    "fill_in",
    "restore",
    "snapshot",
]
