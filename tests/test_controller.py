from __future__ import annotations

import json

import pytest

from keycue import strings
from keycue.config import HelpRowBinding, Settings, SettingsManager
from keycue.controller import HelpController


@pytest.fixture
def controller(tmp_path):
    manager = SettingsManager(tmp_path / "settings.json")
    manager.settings.platform = "other"
    controller = HelpController(manager)
    yield controller
    controller.dispose()


def test_rows_have_descriptions_and_icons(controller) -> None:
    descriptions = controller.describe_rows()
    assert "Move to previous item or group with Shift plus Tab" in descriptions
    assert "Move draggable items with Arrow keys or W, A, S, or D" in descriptions
    assert "Close faucet with Home or 0" in descriptions
    assert all(row.icon is not None for row in controller.rows)
    for row in controller.rows:
        assert len(row.icon_data) == len({tuple(sorted(d.modifier_keys)) for d in row.descriptors})


def test_set_platform_updates_existing_rows(controller) -> None:
    row = next(row for row in controller.rows if row.binding.label == "Check vector values")
    assert row.description.value == "Check vector values with Alt plus C"

    controller.set_platform("mac")
    assert controller.platform == "mac"
    assert controller.settings.platform == "mac"
    assert row.description.value == "Check vector values with Option plus C"


def test_set_platform_rejects_unknown_values(controller) -> None:
    with pytest.raises(ValueError):
        controller.set_platform("amiga")


def test_set_row_label(controller) -> None:
    controller.set_row_label(0, "Next")
    assert controller.rows[0].description.value == "Next with Tab"
    assert controller.settings.rows[0].label == "Next"
    with pytest.raises(IndexError):
        controller.set_row_label(len(controller.rows), "Nope")


def test_row_display_name_falls_back_to_keys(controller) -> None:
    controller.apply_settings(Settings(platform="other", rows=[HelpRowBinding("", ["shift+tab"])]))
    assert controller.row_display_name(0) == "Keys: Shift + Tab"
    assert controller.rows[0].description.value == ""


def test_apply_settings_saves_and_rebuilds(controller, tmp_path) -> None:
    old_rows = list(controller.rows)
    settings = Settings(
        platform="other",
        rows=[HelpRowBinding("Scroll", ["pageUp", "pageDown"])],
        string_overrides={"keySets.pageUpPageDown": "Page keys"},
    )
    controller.apply_settings(settings)

    assert all(row.description.is_disposed for row in old_rows)
    assert controller.describe_rows() == ["Scroll with Page keys"]
    assert controller.settings_path == tmp_path / "settings.json"
    saved = json.loads(controller.settings_path.read_text(encoding="utf-8"))
    assert saved["string_overrides"] == {"keySets.pageUpPageDown": "Page keys"}
    assert strings.PAGE_UP_PAGE_DOWN.value == "Page keys"


def test_apply_settings_drops_previous_string_overrides(tmp_path) -> None:
    manager = SettingsManager(tmp_path / "settings.json")
    manager.settings.platform = "other"
    manager.settings.string_overrides = {"listFormatting.or": "or else"}
    controller = HelpController(manager)
    assert "Close faucet with Home or else 0" in controller.describe_rows()

    controller.apply_settings(Settings(platform="other", rows=[HelpRowBinding("Close", ["home", "0"])]))
    assert controller.describe_rows() == ["Close with Home or 0"]
    assert strings.OR.value == "or"
    controller.dispose()


def test_unknown_string_override_is_rejected(tmp_path) -> None:
    manager = SettingsManager(tmp_path / "settings.json")
    manager.settings.string_overrides = {"key.hyperdrive": "Warp"}
    with pytest.raises(KeyError):
        HelpController(manager)


def test_dispose_releases_rows(controller) -> None:
    rows = list(controller.rows)
    controller.dispose()
    assert controller.rows == []
    assert all(row.description.is_disposed for row in rows)
