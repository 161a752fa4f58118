from __future__ import annotations

import itertools

import pytest

from keycue import strings
from keycue.help.hotkey_sets import (
    ARROW_KEYS,
    HOTKEY_SET_DEFINITIONS,
    HOTKEY_SET_ENTRIES,
    LEFT_RIGHT_ARROW_KEYS,
    PAIRED_VARIANT,
    HotkeySetDefinitionEntry,
    _build_definitions,
    canonical_id,
    get_definition,
    partition_key_set_for_modifiers,
    partition_layout,
)
from keycue.keyboard import sort_keys


def test_canonical_id_ignores_order() -> None:
    assert canonical_id(["arrowDown", "arrowLeft"]) == "arrowLeft|arrowDown::default"
    for permutation in itertools.permutations(["w", "a", "s", "d"]):
        assert canonical_id(permutation, PAIRED_VARIANT) == "w|a|s|d::paired"


def test_get_definition_matches_any_order() -> None:
    definition = get_definition(reversed(ARROW_KEYS))
    assert definition is not None
    assert definition.phrase is strings.ARROW_KEYS
    assert definition.icon_factory == "arrow_keys_row_icon"


def test_variant_lookup_falls_back_to_default() -> None:
    paired = get_definition(ARROW_KEYS, PAIRED_VARIANT)
    assert paired is not None and paired.variant == PAIRED_VARIANT

    fallback = get_definition(LEFT_RIGHT_ARROW_KEYS, PAIRED_VARIANT)
    assert fallback is get_definition(LEFT_RIGHT_ARROW_KEYS)
    assert fallback is not None and fallback.variant == "default"


def test_unknown_combination_has_no_definition() -> None:
    assert get_definition(["q", "z"]) is None
    assert get_definition(["q", "z"], PAIRED_VARIANT) is None


def test_space_or_enter_has_icon_but_no_phrase() -> None:
    definition = get_definition(["enter", "space"])
    assert definition is not None
    assert definition.phrase is None
    assert definition.icon_factory == "space_or_enter"


def test_partition_layout_defaults_to_inline() -> None:
    assert partition_layout(["q", "z"]) == "inline"
    assert partition_layout(ARROW_KEYS) == "inline"
    assert partition_layout(ARROW_KEYS, PAIRED_VARIANT) == "stacked"


def test_partition_keeps_families_together() -> None:
    keys = sort_keys(["q", "w", "s", "space"])
    assert partition_key_set_for_modifiers(keys) == [["w", "s"], ["space", "q"]]


def test_partition_splits_arrows_and_wasd() -> None:
    keys = sort_keys(["arrowLeft", "arrowRight", "arrowUp", "arrowDown", "w", "a", "s", "d"])
    assert partition_key_set_for_modifiers(keys) == [list(ARROW_KEYS), ["w", "a", "s", "d"]]


def test_partition_is_trivial_for_single_family_or_no_family() -> None:
    assert partition_key_set_for_modifiers(sort_keys(ARROW_KEYS)) == [list(ARROW_KEYS)]
    assert partition_key_set_for_modifiers(["q", "z"]) == [["q", "z"]]
    assert partition_key_set_for_modifiers([]) == []


def test_paired_variant_uses_its_families_first() -> None:
    partitions = partition_key_set_for_modifiers(sort_keys(ARROW_KEYS), PAIRED_VARIANT)
    assert partitions == [["arrowLeft", "arrowRight"], ["arrowUp", "arrowDown"]]

    wasd = partition_key_set_for_modifiers(sort_keys("wasd"), PAIRED_VARIANT)
    assert wasd == [["a", "d"], ["w", "s"]]


@pytest.mark.parametrize("variant", ["default", PAIRED_VARIANT, "unknown"])
def test_partitions_are_disjoint_and_complete(variant: str) -> None:
    pool = ["arrowLeft", "arrowRight", "arrowUp", "arrowDown", "w", "a", "s", "d", "space", "q"]
    for size in range(1, len(pool) + 1):
        for combination in itertools.combinations(pool, size):
            keys = sort_keys(combination)
            partitions = partition_key_set_for_modifiers(keys, variant)
            flattened = [key for partition in partitions for key in partition]
            assert all(partitions), (keys, partitions)
            assert len(flattened) == len(set(flattened)), (keys, partitions)
            assert set(flattened) == set(keys), (keys, partitions)


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        HOTKEY_SET_DEFINITIONS["x::default"] = HOTKEY_SET_ENTRIES[0]  # type: ignore[index]


def test_duplicate_entries_are_rejected() -> None:
    entry = HotkeySetDefinitionEntry(keys=("q", "z"))
    with pytest.raises(ValueError, match="Duplicate"):
        _build_definitions([entry, HotkeySetDefinitionEntry(keys=("z", "q"))])


def test_entry_validation() -> None:
    with pytest.raises(ValueError):
        HotkeySetDefinitionEntry(keys=("a",), partition_layout="diagonal")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        HotkeySetDefinitionEntry(keys=("a", "d"), partition_families=(("w", "s"),))
