"""Helpers for working with human readable key sequences."""

from __future__ import annotations

from typing import Iterable, List

MODIFIER_ORDER = ("ctrl", "alt", "shift", "meta")

SIDED_MODIFIERS = (
    "ctrlLeft",
    "ctrlRight",
    "altLeft",
    "altRight",
    "shiftLeft",
    "shiftRight",
    "metaLeft",
    "metaRight",
)

_CANONICAL_NAMES = (
    MODIFIER_ORDER
    + SIDED_MODIFIERS
    + (
        "arrowLeft",
        "arrowRight",
        "arrowUp",
        "arrowDown",
        "space",
        "enter",
        "tab",
        "escape",
        "pageUp",
        "pageDown",
        "home",
        "end",
        "delete",
        "backspace",
    )
)

# Canonical names are camel case; tokens are compared case-insensitively.
_ALIAS_MAP = {name.lower(): name for name in _CANONICAL_NAMES}
_ALIAS_MAP.update(
    {
        "control": "ctrl",
        "ctl": "ctrl",
        "option": "alt",
        "menu": "alt",
        "altgr": "altRight",
        "win": "meta",
        "windows": "meta",
        "cmd": "meta",
        "command": "meta",
        "super": "meta",
        "return": "enter",
        "esc": "escape",
        "del": "delete",
        "spacebar": "space",
        "left": "arrowLeft",
        "right": "arrowRight",
        "up": "arrowUp",
        "down": "arrowDown",
        "pgup": "pageUp",
        "pgdn": "pageDown",
        "pagedn": "pageDown",
    }
)


def normalize_token(token: str) -> str:
    token = token.strip()
    if not token:
        return ""
    lowered = token.lower()
    return _ALIAS_MAP.get(lowered, lowered)


def is_modifier(token: str) -> bool:
    return token in MODIFIER_ORDER or token in SIDED_MODIFIERS


def split_key_sequence(text: str) -> List[str]:
    """Split ``"shift+arrowLeft"`` into normalized tokens, modifiers first."""

    if not text:
        return []
    raw_tokens = [normalize_token(part) for part in text.replace(" ", "").split("+")]
    tokens = [token for token in raw_tokens if token]
    if not tokens:
        return []
    return order_tokens(tokens)


def order_tokens(tokens: Iterable[str]) -> List[str]:
    unique: List[str] = []
    for token in tokens:
        if token not in unique:
            unique.append(token)
    modifiers = [token for token in MODIFIER_ORDER if token in unique]
    sided = sorted(token for token in unique if token in SIDED_MODIFIERS)
    others = [token for token in unique if not is_modifier(token)]
    return modifiers + sided + others


def format_key_sequence(tokens: Iterable[str]) -> str:
    """Return ``"Shift + Left Arrow"`` style text using the current key labels."""

    from ..keyboard.registry import get_label

    ordered = order_tokens(tokens)
    if not ordered:
        return ""
    return " + ".join(get_label(token).value for token in ordered)


def join_key_sequence(tokens: Iterable[str]) -> str:
    ordered = order_tokens(tokens)
    return "+".join(ordered)


__all__ = [
    "MODIFIER_ORDER",
    "SIDED_MODIFIERS",
    "format_key_sequence",
    "is_modifier",
    "join_key_sequence",
    "normalize_token",
    "order_tokens",
    "split_key_sequence",
]
