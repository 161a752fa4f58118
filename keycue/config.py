"""Configuration management for the keyboard help content."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from .help.hotkey_sets import DEFAULT_VARIANT, PAIRED_VARIANT

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "keycue-settings.json"

PlatformSetting = Literal["auto", "mac", "other"]
PLATFORM_CHOICES = ("auto", "mac", "other")


@dataclass
class HelpRowBinding:
    """One help row: the action label and the key strokes that trigger it."""

    label: str
    keys: List[str] = field(default_factory=list)
    variant: str = DEFAULT_VARIANT


@dataclass
class Settings:
    """Application settings persisted to disk."""

    platform: PlatformSetting = "auto"
    rows: List[HelpRowBinding] = field(default_factory=list)
    string_overrides: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def default() -> "Settings":
        return Settings(platform="auto", rows=default_rows(), string_overrides={})


def default_rows() -> List[HelpRowBinding]:
    """Rows covering the common single-key, modifier, and cluster cases."""

    return [
        HelpRowBinding("Move to next item or group", ["tab"]),
        HelpRowBinding("Move to previous item or group", ["shift+tab"]),
        HelpRowBinding("Press buttons", ["space", "enter"]),
        HelpRowBinding("Toggle checkboxes", ["space"]),
        HelpRowBinding("Move between items in a group", ["arrowLeft", "arrowRight", "arrowUp", "arrowDown"]),
        HelpRowBinding(
            "Move draggable items",
            ["arrowLeft", "arrowRight", "arrowUp", "arrowDown", "w", "a", "s", "d"],
        ),
        HelpRowBinding(
            "Move slower",
            [
                "shift+arrowLeft", "shift+arrowRight", "shift+arrowUp", "shift+arrowDown",
                "shift+w", "shift+a", "shift+s", "shift+d",
            ],
        ),
        HelpRowBinding(
            "Jump in larger steps",
            ["shift+arrowLeft", "shift+arrowRight", "shift+arrowUp", "shift+arrowDown"],
            variant=PAIRED_VARIANT,
        ),
        HelpRowBinding("Move horizontally", ["arrowLeft", "arrowRight", "a", "d"]),
        HelpRowBinding("Close faucet", ["home", "0"]),
        HelpRowBinding("Check vector values", ["alt+c"]),
        HelpRowBinding("Remove from graph area", ["delete", "backspace"]),
        HelpRowBinding("Reset all", ["ctrl+alt+r"]),
    ]


def resolve_platform(value: str) -> str:
    """Map a platform setting to the value used by the key labels."""

    if value not in PLATFORM_CHOICES:
        raise ValueError(f"platform must be one of {', '.join(PLATFORM_CHOICES)}")
    if value == "auto":
        return "mac" if sys.platform == "darwin" else "other"
    return value


class SettingsManager:
    """Utility for loading and saving settings."""

    def __init__(self, path: Optional[os.PathLike[str]] = None) -> None:
        self._path = Path(path) if path else self._default_path()
        self.settings = Settings.default()
        self.load()

    @staticmethod
    def _default_path() -> Path:
        config_home = Path(os.environ.get("APPDATA") or Path.home())
        return config_home / DEFAULT_CONFIG_NAME

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        if not self._path.exists():
            return
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data: Dict[str, Any] = json.load(handle)
        except (OSError, json.JSONDecodeError):
            LOGGER.warning("Could not read settings from %s; using defaults", self._path)
            return

        if not isinstance(data, dict):
            LOGGER.warning("Settings in %s are not a JSON object; using defaults", self._path)
            return
        self.settings = self._deserialize(data)

    def save(self) -> None:
        try:
            with self._path.open("w", encoding="utf-8") as handle:
                json.dump(self._serialize(self.settings), handle, indent=2)
        except OSError:
            # Not fatal: the application keeps running with in-memory settings.
            LOGGER.warning("Could not write settings to %s", self._path)

    def _serialize(self, settings: Settings) -> Dict[str, Any]:
        return {
            "platform": settings.platform,
            "rows": [
                {
                    "label": row.label,
                    "keys": list(row.keys),
                    "variant": row.variant,
                }
                for row in settings.rows
            ],
            "string_overrides": dict(settings.string_overrides),
        }

    def _deserialize(self, data: Dict[str, Any]) -> Settings:
        platform = data.get("platform", "auto")
        if platform not in PLATFORM_CHOICES:
            LOGGER.warning("Ignoring unknown platform '%s' in %s", platform, self._path)
            platform = "auto"

        rows_data = data.get("rows", [])
        if not isinstance(rows_data, list):
            LOGGER.warning("Ignoring 'rows' in %s: expected a list", self._path)
            rows_data = []

        rows = []
        for index, item in enumerate(rows_data):
            keys = item.get("keys", []) if isinstance(item, dict) else None
            if not isinstance(keys, list):
                LOGGER.warning("Skipping malformed row %d in %s", index + 1, self._path)
                continue
            rows.append(
                HelpRowBinding(
                    label=str(item.get("label", "")),
                    keys=[str(key) for key in keys],
                    variant=str(item.get("variant", DEFAULT_VARIANT)),
                )
            )
        if not rows:
            rows = default_rows()

        overrides_data = data.get("string_overrides")
        if overrides_data is None:
            overrides_data = {}
        elif not isinstance(overrides_data, dict):
            LOGGER.warning("Ignoring 'string_overrides' in %s: expected an object", self._path)
            overrides_data = {}
        overrides = {str(name): str(text) for name, text in overrides_data.items()}

        return Settings(platform=platform, rows=rows, string_overrides=overrides)


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "HelpRowBinding",
    "Settings",
    "SettingsManager",
    "default_rows",
    "resolve_platform",
]
