"""Icon tree nodes for key caps and the connectors placed between them.

The nodes only describe structure; :mod:`keycue.ui.icon_widgets` turns a tree
into Qt widgets. Text is held as observable values so a rendered icon follows
locale changes without being rebuilt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional, Tuple, Union

from .. import strings
from ..reactive import Property, ReadOnlyProperty

ArrowDirection = Literal["left", "right", "up", "down"]
KeyWidth = Literal["normal", "wide"]

ARROW_GLYPHS = {"left": "←", "right": "→", "up": "↑", "down": "↓"}

DEFAULT_ICON_SPACING = 6.5
DEFAULT_HORIZONTAL_KEY_SPACING = 1.3


@dataclass(frozen=True, eq=False)
class KeyCap:
    """A single key cap showing a text label or an arrow glyph."""

    label: ReadOnlyProperty
    arrow: Optional[ArrowDirection] = None
    width: KeyWidth = "normal"

    @property
    def text(self) -> str:
        if self.arrow is not None:
            return ARROW_GLYPHS[self.arrow]
        return self.label.value


@dataclass(frozen=True, eq=False)
class OrText:
    """The localized "or" placed between alternatives."""

    label: ReadOnlyProperty = field(default_factory=lambda: strings.OR)

    @property
    def text(self) -> str:
        return self.label.value


@dataclass(frozen=True, eq=False)
class HyphenText:
    """A hyphen used for key ranges such as 0-9."""

    label: ReadOnlyProperty = field(default_factory=lambda: strings.HYPHEN)

    @property
    def text(self) -> str:
        return self.label.value


@dataclass(frozen=True, eq=False)
class PlusIcon:
    """The plus sign placed between keys that are pressed together."""

    size: Tuple[float, float] = (8.0, 1.2)


@dataclass(frozen=True, eq=False)
class IconRow:
    """Children laid out left to right."""

    children: Tuple["IconNode", ...] = ()
    spacing: float = DEFAULT_ICON_SPACING


@dataclass(frozen=True, eq=False)
class IconStack:
    """Children laid out top to bottom."""

    children: Tuple["IconNode", ...] = ()
    spacing: float = DEFAULT_ICON_SPACING


IconNode = Union[KeyCap, OrText, HyphenText, PlusIcon, IconRow, IconStack]


def iter_nodes(node: IconNode) -> Iterator[IconNode]:
    """Depth first walk over ``node`` and its descendants."""

    yield node
    if isinstance(node, (IconRow, IconStack)):
        for child in node.children:
            yield from iter_nodes(child)


def key_caps(node: IconNode) -> Tuple[KeyCap, ...]:
    return tuple(item for item in iter_nodes(node) if isinstance(item, KeyCap))


def render_text(node: IconNode) -> str:
    """Flatten an icon tree into readable text, mostly for logs and tests."""

    if isinstance(node, KeyCap):
        return f"[{node.text}]"
    if isinstance(node, (OrText, HyphenText)):
        return node.text
    if isinstance(node, PlusIcon):
        return "+"
    if isinstance(node, IconStack):
        return " / ".join(render_text(child) for child in node.children)
    return " ".join(render_text(child) for child in node.children)


# ----------------------------------------------------------------------
# Primitive key caps
# ----------------------------------------------------------------------
def text_key(label: Union[str, ReadOnlyProperty], width: KeyWidth = "wide") -> KeyCap:
    if isinstance(label, str):
        label = Property(label)
    return KeyCap(label=label, width=width)


def letter_key(label: Union[str, ReadOnlyProperty]) -> KeyCap:
    return text_key(label, width="normal")


def number_key(value: int) -> KeyCap:
    return letter_key(strings.KEY_LABELS[str(value)])


def arrow_key(direction: ArrowDirection) -> KeyCap:
    return KeyCap(label=strings.KEY_LABELS[f"arrow{direction.capitalize()}"], arrow=direction)


__all__ = [
    "DEFAULT_HORIZONTAL_KEY_SPACING",
    "DEFAULT_ICON_SPACING",
    "HyphenText",
    "IconNode",
    "IconRow",
    "IconStack",
    "KeyCap",
    "OrText",
    "PlusIcon",
    "arrow_key",
    "iter_nodes",
    "key_caps",
    "letter_key",
    "number_key",
    "render_text",
    "text_key",
]
