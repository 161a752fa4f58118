from __future__ import annotations

import pytest

from keycue import strings
from keycue.keyboard import KEY_NAMES, MODIFIER_KEYS, UnregisteredKeyError, get_builder, get_label
from keycue.keyboard.key_nodes import KeyCap
from keycue.keyboard.registry import KEY_DISPLAY_REGISTRY, is_registered


def test_every_vocabulary_key_is_registered() -> None:
    for key in (*KEY_NAMES, *MODIFIER_KEYS):
        assert is_registered(key), key
        assert isinstance(get_builder(key)(), KeyCap)


def test_get_label_returns_the_localized_label() -> None:
    assert get_label("space").value == "Space"
    assert get_label("arrowLeft").value == "Left Arrow"
    assert get_label("7").value == "7"


def test_unregistered_key_label_is_a_configuration_error() -> None:
    with pytest.raises(UnregisteredKeyError, match="f13"):
        get_label("f13")


def test_unregistered_key_builder_is_a_configuration_error() -> None:
    with pytest.raises(UnregisteredKeyError):
        get_builder("f13")


def test_registry_cannot_be_modified() -> None:
    with pytest.raises(TypeError):
        KEY_DISPLAY_REGISTRY["f13"] = KEY_DISPLAY_REGISTRY["a"]  # type: ignore[index]


def test_alt_follows_platform() -> None:
    cap = get_builder("alt")()
    assert get_label("alt").value == "Alt"
    assert cap.text == "Alt"

    strings.PLATFORM.value = "mac"
    assert get_label("alt").value == "Option"
    assert cap.text == "Option"
    assert get_label("meta").value == "Command"


def test_key_caps_use_short_labels() -> None:
    assert get_builder("escape")().text == "Esc"
    assert get_builder("arrowUp")().text == "↑"
    assert get_builder("arrowUp")().arrow == "up"
    assert get_builder("q")().width == "normal"
    assert get_builder("space")().width == "wide"


def test_vocabulary_check_reports_missing_keys(monkeypatch) -> None:
    from keycue.keyboard import registry

    registry.validate_key_vocabulary()
    monkeypatch.setattr(registry, "KEY_NAMES", registry.KEY_NAMES + ("f13",))
    with pytest.raises(UnregisteredKeyError, match="f13"):
        registry.validate_key_vocabulary()
