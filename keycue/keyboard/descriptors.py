"""Key descriptors: one key plus the modifiers that must be held with it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Tuple

from ..utils.key_sequences import (
    MODIFIER_ORDER,
    SIDED_MODIFIERS,
    is_modifier,
    join_key_sequence,
    split_key_sequence,
)
from .priority import sort_modifiers

MODIFIER_KEYS: Tuple[str, ...] = MODIFIER_ORDER + SIDED_MODIFIERS

KEY_NAMES: Tuple[str, ...] = (
    ("arrowLeft", "arrowRight", "arrowUp", "arrowDown")
    + ("space", "enter", "tab", "escape")
    + ("pageUp", "pageDown", "home", "end", "delete", "backspace")
    + tuple("abcdefghijklmnopqrstuvwxyz")
    + tuple("0123456789")
)


@dataclass(frozen=True)
class KeyDescriptor:
    """A single non-modifier key and the set of modifiers pressed with it."""

    key: str
    modifier_keys: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("KeyDescriptor requires a key")
        if is_modifier(self.key):
            raise ValueError(f"'{self.key}' is a modifier and cannot be the primary key")
        modifiers = frozenset(self.modifier_keys)
        invalid = sorted(modifier for modifier in modifiers if not is_modifier(modifier))
        if invalid:
            raise ValueError(f"Not modifier keys: {', '.join(invalid)}")
        object.__setattr__(self, "modifier_keys", modifiers)

    @classmethod
    def from_key_stroke(cls, stroke: str) -> "KeyDescriptor":
        """Parse ``"shift+arrowLeft"`` style text."""

        tokens = split_key_sequence(stroke)
        keys = [token for token in tokens if not is_modifier(token)]
        if len(keys) != 1:
            raise ValueError(f"Key stroke '{stroke}' must contain exactly one non-modifier key")
        modifiers = [token for token in tokens if is_modifier(token)]
        return cls(keys[0], frozenset(modifiers))

    @property
    def sorted_modifiers(self) -> List[str]:
        return sort_modifiers(self.modifier_keys)

    def to_key_stroke(self) -> str:
        return join_key_sequence([*self.modifier_keys, self.key])

    def __str__(self) -> str:
        return self.to_key_stroke()


def descriptors_from_key_strokes(strokes: Iterable[str]) -> List[KeyDescriptor]:
    return [KeyDescriptor.from_key_stroke(stroke) for stroke in strokes]


__all__ = ["KEY_NAMES", "MODIFIER_KEYS", "KeyDescriptor", "descriptors_from_key_strokes"]
