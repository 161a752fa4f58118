"""Reusable icons for keyboard help rows.

Only a collection of functions; icons are plain trees of
:mod:`keycue.keyboard.key_nodes` and are turned into widgets elsewhere.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence, Tuple

from ..keyboard.key_nodes import (
    DEFAULT_HORIZONTAL_KEY_SPACING,
    DEFAULT_ICON_SPACING,
    HyphenText,
    IconNode,
    IconRow,
    OrText,
    PlusIcon,
    arrow_key,
)
from ..keyboard.registry import get_builder


def icon_or_icon(left_icon: IconNode, right_icon: IconNode, spacing: float = DEFAULT_ICON_SPACING) -> IconRow:
    """Two icons side by side, separated by "or"."""

    return IconRow(children=(left_icon, OrText(), right_icon), spacing=spacing)


def icon_to_icon(left_icon: IconNode, right_icon: IconNode) -> IconRow:
    """Two icons separated by a hyphen, for ranges like 0-9."""

    return IconRow(children=(left_icon, HyphenText(), right_icon), spacing=DEFAULT_ICON_SPACING / 2)


def icon_plus_icon(
    left_icon: IconNode,
    right_icon: IconNode,
    plus_icon_size: Tuple[float, float] = (8.0, 1.2),
) -> IconRow:
    """Two icons side by side, separated by "+"."""

    return IconRow(children=(left_icon, PlusIcon(size=plus_icon_size), right_icon))


def shift_plus_icon(icon: IconNode) -> IconRow:
    return icon_plus_icon(get_builder("shift")(), icon)


def icon_row(icons: Sequence[IconNode], spacing: float = DEFAULT_HORIZONTAL_KEY_SPACING) -> IconRow:
    return IconRow(children=tuple(icons), spacing=spacing)


def _key_row(*keys: str) -> IconRow:
    return icon_row([get_builder(key)() for key in keys])


def space_or_enter() -> IconRow:
    return icon_or_icon(get_builder("space")(), get_builder("enter")())


def arrow_keys_row_icon() -> IconRow:
    return icon_row([arrow_key("up"), arrow_key("left"), arrow_key("down"), arrow_key("right")])


def left_right_arrow_keys_row_icon() -> IconRow:
    return icon_row([arrow_key("left"), arrow_key("right")])


def up_down_arrow_keys_row_icon() -> IconRow:
    return icon_row([arrow_key("up"), arrow_key("down")])


def wasd_row_icon() -> IconRow:
    return _key_row("w", "a", "s", "d")


def a_d_keys_row_icon() -> IconRow:
    return _key_row("a", "d")


def w_s_keys_row_icon() -> IconRow:
    return _key_row("w", "s")


def page_up_page_down_row_icon() -> IconRow:
    return icon_row([get_builder("pageUp")(), get_builder("pageDown")()], spacing=DEFAULT_ICON_SPACING)


def arrow_or_wasd_keys_row_icon() -> IconRow:
    return icon_or_icon(arrow_keys_row_icon(), wasd_row_icon())


def left_right_or_a_d_keys_row_icon() -> IconRow:
    return icon_or_icon(left_right_arrow_keys_row_icon(), a_d_keys_row_icon())


def up_down_or_w_s_keys_row_icon() -> IconRow:
    return icon_or_icon(up_down_arrow_keys_row_icon(), w_s_keys_row_icon())


def left_right_or_up_down_keys_row_icon() -> IconRow:
    return icon_or_icon(left_right_arrow_keys_row_icon(), up_down_arrow_keys_row_icon())


def a_d_or_w_s_keys_row_icon() -> IconRow:
    return icon_or_icon(a_d_keys_row_icon(), w_s_keys_row_icon())


# Names referenced by hotkey set definitions.
ICON_FACTORIES: Dict[str, Callable[[], IconNode]] = {
    "space_or_enter": space_or_enter,
    "arrow_keys_row_icon": arrow_keys_row_icon,
    "left_right_arrow_keys_row_icon": left_right_arrow_keys_row_icon,
    "up_down_arrow_keys_row_icon": up_down_arrow_keys_row_icon,
    "wasd_row_icon": wasd_row_icon,
    "a_d_keys_row_icon": a_d_keys_row_icon,
    "w_s_keys_row_icon": w_s_keys_row_icon,
    "page_up_page_down_row_icon": page_up_page_down_row_icon,
    "arrow_or_wasd_keys_row_icon": arrow_or_wasd_keys_row_icon,
    "left_right_or_a_d_keys_row_icon": left_right_or_a_d_keys_row_icon,
    "up_down_or_w_s_keys_row_icon": up_down_or_w_s_keys_row_icon,
    "left_right_or_up_down_keys_row_icon": left_right_or_up_down_keys_row_icon,
    "a_d_or_w_s_keys_row_icon": a_d_or_w_s_keys_row_icon,
}


__all__ = [
    "ICON_FACTORIES",
    "a_d_keys_row_icon",
    "a_d_or_w_s_keys_row_icon",
    "arrow_keys_row_icon",
    "arrow_or_wasd_keys_row_icon",
    "icon_or_icon",
    "icon_plus_icon",
    "icon_row",
    "icon_to_icon",
    "left_right_arrow_keys_row_icon",
    "left_right_or_a_d_keys_row_icon",
    "left_right_or_up_down_keys_row_icon",
    "page_up_page_down_row_icon",
    "shift_plus_icon",
    "space_or_enter",
    "up_down_arrow_keys_row_icon",
    "up_down_or_w_s_keys_row_icon",
    "w_s_keys_row_icon",
    "wasd_row_icon",
]
