"""Entry point for the keyboard help tool."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List

from .config import PLATFORM_CHOICES, SettingsManager
from .controller import HelpController

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Keyboard help sentences and key-cap icons")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to the settings JSON file (defaults to keycue-settings.json in APPDATA/home)",
    )
    parser.add_argument(
        "--platform",
        choices=PLATFORM_CHOICES,
        help="Use Mac or Windows/Linux key names (auto detects by default)",
    )
    parser.add_argument(
        "--string",
        action="append",
        default=[],
        metavar="NAME=TEXT",
        help="Replace a named text value, e.g. listFormatting.or=or else (repeatable)",
    )
    parser.add_argument(
        "--mode",
        choices=["print", "window"],
        default="print",
        help="Print the help sentences or open the help window",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity",
    )
    return parser


def parse_string_overrides(values: List[str]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for value in values:
        name, separator, text = value.partition("=")
        if not separator or not name.strip():
            raise ValueError(f"Expected NAME=TEXT, got '{value}'")
        overrides[name.strip()] = text
    return overrides


def print_rows(controller: HelpController) -> None:
    for row in controller.rows:
        keys = ", ".join(row.binding.keys)
        print(f"{keys} -> {row.description.value}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        overrides = parse_string_overrides(args.string)
    except ValueError as exc:
        parser.error(str(exc))

    settings_manager = SettingsManager(args.config)
    if args.platform:
        settings_manager.settings.platform = args.platform
    if overrides:
        settings_manager.settings.string_overrides.update(overrides)

    try:
        controller = HelpController(settings_manager)
    except (KeyError, ValueError) as exc:
        parser.error(str(exc))
    LOGGER.debug("Loaded %d help rows from %s", len(controller.rows), settings_manager.path)

    if args.mode == "window":
        from .ui.main_window import launch

        launch(controller)
    else:
        print_rows(controller)
        controller.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
