from __future__ import annotations

import pytest

from keycue import strings


def test_fill_in_replaces_known_placeholders() -> None:
    assert strings.fill_in("{action} with {keys}", action="Move", keys="W") == "Move with W"


def test_fill_in_leaves_unknown_placeholders() -> None:
    assert strings.fill_in("{action} with {keys}", action="Move") == "Move with {keys}"


def test_apply_overrides_sets_values_by_name() -> None:
    strings.apply_overrides({"key.space": "Spacebar", "listFormatting.or": "or else"})
    assert strings.KEY_LABELS["space"].value == "Spacebar"
    assert strings.OR.value == "or else"


def test_apply_overrides_rejects_unknown_names_before_changing_anything() -> None:
    with pytest.raises(KeyError, match="key.hyperdrive"):
        strings.apply_overrides({"key.space": "Spacebar", "key.hyperdrive": "Warp"})
    assert strings.KEY_LABELS["space"].value == "Space"


def test_snapshot_and_restore() -> None:
    saved = strings.snapshot()
    strings.ARROW_KEYS.value = "Cursor keys"
    strings.restore(saved)
    assert strings.ARROW_KEYS.value == "Arrow keys"
    assert saved["keySets.arrow"] == "Arrow keys"


def test_platform_drives_modifier_wording() -> None:
    assert strings.ALT_OR_OPTION.value == "Alt"
    assert strings.META_OR_COMMAND.value == "Windows"
    strings.PLATFORM.value = "mac"
    assert strings.ALT_OR_OPTION.value == "Option"
    assert strings.META_OR_COMMAND.value == "Command"


def test_every_name_is_namespaced() -> None:
    for name in strings.STRINGS:
        assert name == "platform" or "." in name
