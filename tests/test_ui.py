from __future__ import annotations

import os

import pytest

if not os.getenv("PYQT_TESTS"):
    pytest.skip("PYQT_TESTS not set; skipping PyQt-dependent test", allow_module_level=True)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication, QLabel  # noqa: E402

from keycue import strings  # noqa: E402
from keycue.config import SettingsManager  # noqa: E402
from keycue.controller import HelpController  # noqa: E402
from keycue.help import compose_icon  # noqa: E402
from keycue.keyboard import descriptors_from_key_strokes  # noqa: E402
from keycue.ui.icon_widgets import (  # noqa: E402
    ConnectorLabel,
    KeyCapWidget,
    PlusWidget,
    build_icon_widget,
    release_icon_widget,
)
from keycue.ui.main_window import HelpWindow  # noqa: E402

pytestmark = pytest.mark.pyqt_required


@pytest.fixture(scope="module")
def qt_app():
    app = QApplication.instance() or QApplication([])
    yield app


def test_icon_widget_mirrors_tree(qt_app) -> None:
    icon = compose_icon(descriptors_from_key_strokes(["space", "shift+tab"]))
    widget = build_icon_widget(icon)

    caps = widget.findChildren(KeyCapWidget)
    assert sorted(cap.text() for cap in caps) == ["Shift", "Space", "Tab"]
    assert len(widget.findChildren(PlusWidget)) == 1
    assert [label.text() for label in widget.findChildren(ConnectorLabel)] == ["or"]
    release_icon_widget(widget)


def test_widgets_follow_label_changes_until_released(qt_app) -> None:
    icon = compose_icon(descriptors_from_key_strokes(["home", "0"]))
    widget = build_icon_widget(icon)
    (connector,) = widget.findChildren(ConnectorLabel)
    home = next(cap for cap in widget.findChildren(KeyCapWidget) if cap.text() == "Home")
    narrow_width = home.width()

    strings.OR.value = "or else"
    strings.KEY_CAP_LABELS.get("home", strings.KEY_LABELS["home"]).value = "Home key"
    assert connector.text() == "or else"
    assert home.width() > narrow_width

    listeners_before = strings.OR.listener_count
    release_icon_widget(widget)
    assert strings.OR.listener_count == listeners_before - 1


def test_help_window_shows_descriptions(qt_app, tmp_path) -> None:
    manager = SettingsManager(tmp_path / "settings.json")
    manager.settings.platform = "other"
    controller = HelpController(manager)
    window = HelpWindow(controller)

    texts = [label.text() for label in window.description_labels]
    assert texts == controller.describe_rows()
    assert all(isinstance(label, QLabel) for label in window.description_labels)

    window.mac_keyboard_action.setChecked(True)
    assert "Check vector values with Option plus C" in [label.text() for label in window.description_labels]

    window.release()
    controller.dispose()
    window.deleteLater()
