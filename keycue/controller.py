"""Core controller that turns configured rows into help sentences and icons."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from . import strings
from .config import HelpRowBinding, Settings, SettingsManager, resolve_platform
from .help import IconGroupData, build_icon_data, describe
from .help.icon_composer import compose_icon_from_data
from .keyboard import KeyDescriptor, descriptors_from_key_strokes
from .keyboard.key_nodes import IconNode
from .reactive import DerivedProperty, Property
from .utils import format_key_sequence, split_key_sequence

LOGGER = logging.getLogger(__name__)


@dataclass
class HelpRow:
    """Everything needed to show one row of the keyboard help dialog."""

    binding: HelpRowBinding
    label: Property
    descriptors: List[KeyDescriptor]
    description: DerivedProperty
    icon_data: List[IconGroupData]
    icon: IconNode


class HelpController:
    """State manager for the keyboard help content."""

    def __init__(self, settings_manager: SettingsManager) -> None:
        self._settings_manager = settings_manager
        self.settings = settings_manager.settings
        self.rows: List[HelpRow] = []
        self._default_strings = strings.snapshot()
        self._apply_strings()
        self._build_rows()

    # ------------------------------------------------------------------
    # Settings persistence
    # ------------------------------------------------------------------
    @property
    def settings_path(self) -> Path:
        return self._settings_manager.path

    def save_settings(self) -> None:
        self._settings_manager.settings = self.settings
        self._settings_manager.save()

    def apply_settings(self, settings: Settings) -> None:
        """Replace the current settings with ``settings`` and persist them."""

        self.dispose()
        self.settings = settings
        self.save_settings()
        self._apply_strings()
        self._build_rows()

    def _apply_strings(self) -> None:
        strings.restore(self._default_strings)
        strings.PLATFORM.value = resolve_platform(self.settings.platform)
        if self.settings.string_overrides:
            strings.apply_overrides(self.settings.string_overrides)

    # ------------------------------------------------------------------
    # Platform
    # ------------------------------------------------------------------
    @property
    def platform(self) -> str:
        return strings.PLATFORM.value

    def set_platform(self, platform: str) -> None:
        """Switch key wording between Mac and other keyboards."""

        strings.PLATFORM.value = resolve_platform(platform)
        self.settings.platform = platform  # type: ignore[assignment]
        LOGGER.info("Keyboard platform set to %s", strings.PLATFORM.value)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------
    def _build_rows(self) -> None:
        self.rows = [self._build_row(binding) for binding in self.settings.rows]
        LOGGER.debug("Built %d help rows", len(self.rows))

    def _build_row(self, binding: HelpRowBinding) -> HelpRow:
        descriptors = descriptors_from_key_strokes(binding.keys)
        label = Property(binding.label)
        icon_data = build_icon_data(descriptors, binding.variant)
        return HelpRow(
            binding=binding,
            label=label,
            descriptors=descriptors,
            description=describe(label, descriptors, binding.variant),
            icon_data=icon_data,
            icon=compose_icon_from_data(icon_data),
        )

    def set_row_label(self, index: int, text: str) -> None:
        if not 0 <= index < len(self.rows):
            raise IndexError("Invalid row index")
        self.rows[index].label.value = text
        self.rows[index].binding.label = text

    def row_display_name(self, index: int) -> str:
        row = self.rows[index]
        if row.binding.label:
            return row.binding.label
        display = " / ".join(format_key_sequence(split_key_sequence(key)) for key in row.binding.keys)
        return f"Keys: {display}" if display else f"Row {index + 1}"

    def describe_rows(self) -> List[str]:
        return [row.description.value for row in self.rows]

    def dispose(self) -> None:
        """Release the observers held by the row descriptions."""

        for row in self.rows:
            row.description.dispose()
        self.rows = []


__all__ = ["HelpController", "HelpRow"]
