"""Qt window that shows the configured keyboard help rows."""

from __future__ import annotations

from typing import Callable, List, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication,
    QGridLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QStatusBar,
    QToolBar,
    QWidget,
)

from ..controller import HelpController
from ..reactive import ReadOnlyProperty
from .icon_widgets import build_icon_widget, release_icon_widget


class HelpWindow(QMainWindow):
    """Main application window listing one icon and sentence per row."""

    def __init__(self, controller: HelpController) -> None:
        super().__init__()
        self.controller = controller
        self.setWindowTitle("Keyboard Help")
        self._icon_widgets: List[QWidget] = []
        self.description_labels: List[QLabel] = []
        self._links: List[Tuple[ReadOnlyProperty, Callable[[str], None]]] = []
        self._setup_ui()

    # ------------------------------------------------------------------
    def _setup_ui(self) -> None:
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        self.setCentralWidget(scroll)

        content = QWidget(scroll)
        grid = QGridLayout(content)
        grid.setContentsMargins(16, 16, 16, 16)
        grid.setHorizontalSpacing(16)
        grid.setVerticalSpacing(10)
        scroll.setWidget(content)

        for index, row in enumerate(self.controller.rows):
            icon_widget = build_icon_widget(row.icon, content)
            grid.addWidget(icon_widget, index, 0, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
            self._icon_widgets.append(icon_widget)

            text = QLabel(content)
            text.setWordWrap(True)
            grid.addWidget(text, index, 1, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
            self.description_labels.append(text)
            self._link(row.description, text)

        grid.setRowStretch(len(self.controller.rows), 1)

        self._setup_toolbar()
        self._setup_statusbar()
        self._apply_styles()

    def _link(self, prop: ReadOnlyProperty, label: QLabel) -> None:
        def _update(value: str) -> None:
            label.setText(value)

        prop.link(_update)
        self._links.append((prop, _update))

    # ------------------------------------------------------------------
    def _setup_toolbar(self) -> None:
        toolbar = QToolBar("Controls", self)
        toolbar.setMovable(False)
        self.addToolBar(Qt.ToolBarArea.TopToolBarArea, toolbar)

        self.mac_keyboard_action = QAction("Mac Keyboard", self)
        self.mac_keyboard_action.setCheckable(True)
        self.mac_keyboard_action.setChecked(self.controller.platform == "mac")
        self.mac_keyboard_action.toggled.connect(self._toggle_platform)
        toolbar.addAction(self.mac_keyboard_action)

        save_action = QAction("Save Settings", self)
        save_action.triggered.connect(self._save_settings)
        toolbar.addAction(save_action)

    def _setup_statusbar(self) -> None:
        status = QStatusBar(self)
        self.setStatusBar(status)
        self._platform_label = QLabel()
        status.addPermanentWidget(self._platform_label)
        self._update_platform_indicator()

    # ------------------------------------------------------------------
    def _toggle_platform(self, checked: bool) -> None:
        self.controller.set_platform("mac" if checked else "other")
        self._update_platform_indicator()

    def _save_settings(self) -> None:
        self.controller.save_settings()
        QMessageBox.information(self, "Keyboard Help", f"Saved to {self.controller.settings_path}")

    def _update_platform_indicator(self) -> None:
        name = "Mac" if self.controller.platform == "mac" else "Windows/Linux"
        self._platform_label.setText(f"Keyboard: {name}")

    # ------------------------------------------------------------------
    def release(self) -> None:
        """Detach every observer this window added."""

        for prop, listener in self._links:
            prop.unlink(listener)
        self._links.clear()
        for widget in self._icon_widgets:
            release_icon_widget(widget)
        self._icon_widgets.clear()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.release()
        super().closeEvent(event)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QScrollArea, QScrollArea > QWidget > QWidget {
                background-color: #fafafa;
                color: #21252c;
            }
            QLabel {
                color: #21252c;
                font-size: 15px;
            }
            QToolBar {
                background: #e9ecf1;
                border-bottom: 1px solid #c9ced6;
                spacing: 8px;
                padding: 4px;
            }
            QStatusBar {
                background: #e9ecf1;
                color: #4a505a;
            }
            """
        )


def launch(controller: HelpController) -> None:
    """Run the Qt application."""

    app = QApplication.instance() or QApplication([])
    window = HelpWindow(controller)
    window.resize(900, 600)
    window.show()
    app.exec()
    controller.dispose()


__all__ = ["HelpWindow", "launch"]
