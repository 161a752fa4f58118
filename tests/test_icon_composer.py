from __future__ import annotations

import pytest

from keycue import strings
from keycue.help import PAIRED_VARIANT, build_icon_data, compose_icon
from keycue.help.icon_composer import (
    IconGroupData,
    build_key_set_icon,
    compose_group_icon,
    validate_icon_factories,
)
from keycue.help.icon_factory import (
    ICON_FACTORIES,
    icon_to_icon,
    page_up_page_down_row_icon,
    shift_plus_icon,
    space_or_enter,
)
from keycue.keyboard import KeyDescriptor, UnregisteredKeyError, descriptors_from_key_strokes
from keycue.keyboard.key_nodes import (
    IconRow,
    IconStack,
    KeyCap,
    OrText,
    key_caps,
    letter_key,
    number_key,
    render_text,
)

ARROWS = ["arrowLeft", "arrowRight", "arrowUp", "arrowDown"]


def icon_text(strokes, variant: str = "default") -> str:
    return render_text(compose_icon(descriptors_from_key_strokes(strokes), variant))


@pytest.mark.parametrize(
    "strokes, expected",
    [
        (["space"], "[Space]"),
        (ARROWS, "[↑] [←] [↓] [→]"),
        (["home", "0"], "[Home] or [0]"),
        (["enter", "space"], "[Space] or [Enter]"),
        (["pageDown", "pageUp"], "[Pg Up] [Pg Dn]"),
        (["w", "s"], "[W] [S]"),
        (["alt+ctrl+f"], "[Ctrl] + [Alt] + [F]"),
        (["space", "shift+tab"], "[Space] or [Shift] + [Tab]"),
        (["ctrl+arrowLeft", "ctrl+arrowRight", "ctrl+space"], "[Ctrl] + [←] [→] or [Ctrl] + [Space]"),
        (["r", "l", "c"], "[C] or [L] or [R]"),
    ],
)
def test_composed_icons(strokes, expected: str) -> None:
    assert icon_text(strokes) == expected


def test_arrow_cluster_has_no_or_between_keys() -> None:
    icon = compose_icon(descriptors_from_key_strokes(ARROWS))
    assert isinstance(icon, IconRow)
    assert not any(isinstance(child, OrText) for child in icon.children)
    assert len(key_caps(icon)) == 4


def test_paired_variant_stacks_alternatives() -> None:
    icon = compose_icon(descriptors_from_key_strokes([f"shift+{key}" for key in ARROWS]), PAIRED_VARIANT)
    assert isinstance(icon, IconStack)
    assert len(icon.children) == 2
    assert render_text(icon) == "[Shift] + [←] [→] or / [Shift] + [↑] [↓]"


def test_icon_groups_match_modifier_groups() -> None:
    data = build_icon_data(descriptors_from_key_strokes(["space", "shift+tab", "shift+a"]))
    assert len(data) == 2
    assert render_text(data[0].alternatives[0]) == "[Space]"
    assert render_text(data[1].alternatives[0]) == "[Shift] + [A] or [Tab]"
    assert [group.layout for group in data] == ["inline", "inline"]


def test_eight_keys_with_shift_are_stacked() -> None:
    strokes = [f"shift+{key}" for key in ARROWS + ["w", "a", "s", "d"]]
    (data,) = build_icon_data(descriptors_from_key_strokes(strokes))
    assert data.layout == "stacked"
    assert [render_text(alternative) for alternative in data.alternatives] == [
        "[Shift] + [↑] [←] [↓] [→]",
        "[Shift] + [W] [A] [S] [D]",
    ]


def test_no_descriptors_gives_empty_row() -> None:
    icon = compose_icon([])
    assert isinstance(icon, IconRow)
    assert icon.children == ()
    assert build_icon_data([]) == []


def test_unregistered_key_is_an_error() -> None:
    with pytest.raises(UnregisteredKeyError):
        compose_icon([KeyDescriptor("f13")])


def test_compose_group_icon_inline_and_single() -> None:
    single = letter_key("A")
    assert compose_group_icon(IconGroupData(alternatives=(single,))) is single
    inline = compose_group_icon(IconGroupData(alternatives=(letter_key("A"), letter_key("B"), letter_key("C"))))
    assert render_text(inline) == "[A] or [B] or [C]"


def test_build_key_set_icon_uses_canned_icon() -> None:
    assert render_text(build_key_set_icon(["d", "a"])) == "[A] [D]"
    assert render_text(build_key_set_icon(["q"])) == "[Q]"


def test_icon_factory_helpers() -> None:
    assert render_text(space_or_enter()) == "[Space] or [Enter]"
    assert render_text(icon_to_icon(number_key(0), number_key(9))) == "[0] - [9]"
    assert render_text(shift_plus_icon(letter_key("A"))) == "[Shift] + [A]"
    assert page_up_page_down_row_icon().spacing > icon_to_icon(number_key(0), number_key(9)).spacing


def test_every_canned_icon_builds() -> None:
    validate_icon_factories()
    for name, factory in ICON_FACTORIES.items():
        assert key_caps(factory()), name


def test_key_cap_text_follows_labels() -> None:
    icon = compose_icon(descriptors_from_key_strokes(["alt+c"]))
    caps = key_caps(icon)
    assert [cap.text for cap in caps] == ["Alt", "C"]

    strings.PLATFORM.value = "mac"
    strings.KEY_LABELS["c"].value = "Ç"
    assert [cap.text for cap in caps] == ["Option", "Ç"]
    assert all(isinstance(cap, KeyCap) for cap in caps)
