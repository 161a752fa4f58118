"""Render key-cap icon trees as Qt widgets."""

from __future__ import annotations

from typing import Union

from PySide6.QtCore import QRectF, QSize, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from ..keyboard.key_nodes import HyphenText, IconNode, IconRow, IconStack, KeyCap, OrText, PlusIcon
from ..reactive import ReadOnlyProperty

KEY_HEIGHT = 28
KEY_PADDING = 8
KEY_CORNER_RADIUS = 5


class KeyCapWidget(QWidget):
    """Paints a single key cap and repaints when its label changes."""

    def __init__(self, key_cap: KeyCap, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._key_cap = key_cap
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._refresh_size()
        key_cap.label.lazy_link(self._label_changed)

    @property
    def key_cap(self) -> KeyCap:
        return self._key_cap

    def text(self) -> str:
        return self._key_cap.text

    def detach(self) -> None:
        self._key_cap.label.unlink(self._label_changed)

    # ------------------------------------------------------------------
    def _label_changed(self, _value: str) -> None:
        self._refresh_size()
        self.update()

    def _refresh_size(self) -> None:
        if self._key_cap.width == "wide":
            text_width = self.fontMetrics().horizontalAdvance(self.text())
            width = max(KEY_HEIGHT, text_width + KEY_PADDING * 2)
        else:
            width = KEY_HEIGHT
        self.setFixedSize(QSize(width, KEY_HEIGHT))

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        rect = QRectF(self.rect()).adjusted(1, 1, -1, -1)
        painter.setPen(QPen(QColor(120, 128, 142), 1.2))
        painter.setBrush(QColor(245, 245, 245))
        painter.drawRoundedRect(rect, KEY_CORNER_RADIUS, KEY_CORNER_RADIUS)
        painter.setPen(QColor(33, 37, 44))
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self.text())
        painter.end()


class PlusWidget(QWidget):
    """A small plus sign between keys pressed together."""

    def __init__(self, node: PlusIcon, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        width, thickness = node.size
        self._length = width
        self._thickness = thickness
        self.setFixedSize(QSize(int(width) + 2, KEY_HEIGHT))

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(QPen(QColor(33, 37, 44), self._thickness))
        center_x = self.width() / 2.0
        center_y = self.height() / 2.0
        half = self._length / 2.0
        painter.drawLine(int(center_x - half), int(center_y), int(center_x + half), int(center_y))
        painter.drawLine(int(center_x), int(center_y - half), int(center_x), int(center_y + half))
        painter.end()


class ConnectorLabel(QLabel):
    """Text between icons, such as "or", kept in sync with its label."""

    def __init__(self, text: ReadOnlyProperty, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._text_property = text
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        text.link(self._text_changed)

    def _text_changed(self, value: str) -> None:
        self.setText(value)

    def detach(self) -> None:
        self._text_property.unlink(self._text_changed)


def build_icon_widget(node: IconNode, parent: QWidget | None = None) -> QWidget:
    """Create a widget tree that mirrors ``node``."""

    if isinstance(node, KeyCap):
        return KeyCapWidget(node, parent)
    if isinstance(node, (OrText, HyphenText)):
        return ConnectorLabel(node.label, parent)
    if isinstance(node, PlusIcon):
        return PlusWidget(node, parent)

    container = QWidget(parent)
    layout: Union[QHBoxLayout, QVBoxLayout]
    if isinstance(node, IconStack):
        layout = QVBoxLayout(container)
        alignment = Qt.AlignmentFlag.AlignLeft
    else:
        layout = QHBoxLayout(container)
        alignment = Qt.AlignmentFlag.AlignVCenter
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(int(round(node.spacing)))
    for child in node.children:
        layout.addWidget(build_icon_widget(child, container), 0, alignment)
    return container


def release_icon_widget(widget: QWidget) -> None:
    """Unlink every label observer held by ``widget`` and its children."""

    targets = [widget, *widget.findChildren(QWidget)]
    for target in targets:
        if isinstance(target, (KeyCapWidget, ConnectorLabel)):
            target.detach()


__all__ = [
    "ConnectorLabel",
    "KeyCapWidget",
    "PlusWidget",
    "build_icon_widget",
    "release_icon_widget",
]
