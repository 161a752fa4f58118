"""Fixed display ordering for keys and modifiers."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from ..utils.key_sequences import MODIFIER_ORDER

# Keys not listed here sort after every listed key, alphabetically.
ONE_KEY_STROKE_PRIORITY: Tuple[str, ...] = (
    "arrowLeft", "arrowRight", "arrowUp", "arrowDown",
    "w", "a", "s", "d",
    "space", "enter", "tab", "escape",
    "pageUp", "pageDown", "home", "end",
    "delete", "backspace",
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
)

MODIFIER_PRIORITY: Tuple[str, ...] = MODIFIER_ORDER


def _sort_by_priority(keys: Iterable[str], priority: Sequence[str]) -> List[str]:
    ranks = {key: index for index, key in enumerate(priority)}
    unknown = len(priority)
    return sorted(set(keys), key=lambda key: (ranks.get(key, unknown), key))


def sort_keys(keys: Iterable[str]) -> List[str]:
    """Deduplicate ``keys`` and sort them into display order."""

    return _sort_by_priority(keys, ONE_KEY_STROKE_PRIORITY)


def sort_modifiers(modifiers: Iterable[str]) -> List[str]:
    """Deduplicate ``modifiers`` and sort them, ctrl first and meta last."""

    return _sort_by_priority(modifiers, MODIFIER_PRIORITY)


__all__ = ["MODIFIER_PRIORITY", "ONE_KEY_STROKE_PRIORITY", "sort_keys", "sort_modifiers"]
