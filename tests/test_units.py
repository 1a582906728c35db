"""Tests for the unit table."""

import pytest

from macro_lookup.services.units import (
    GRAMS_PER_UNIT,
    UNIT_ALIASES,
    canonical_unit,
    grams_per_unit,
    is_known_unit,
)


def test_every_alias_points_at_a_table_unit() -> None:
    assert set(UNIT_ALIASES.values()) == set(GRAMS_PER_UNIT)
    for canonical in GRAMS_PER_UNIT:
        assert UNIT_ALIASES[canonical] == canonical


def test_aliases_share_the_canonical_factor() -> None:
    for alias, canonical in UNIT_ALIASES.items():
        assert grams_per_unit(alias) == grams_per_unit(canonical)


def test_lookup_is_case_insensitive() -> None:
    assert canonical_unit("LBS") == "lb"
    assert canonical_unit(" Cups ") == "cup"
    assert is_known_unit("Grams")


def test_unknown_units() -> None:
    assert canonical_unit("slice") is None
    assert not is_known_unit("handful")
    assert not is_known_unit(None)
    with pytest.raises(KeyError):
        grams_per_unit("handful")


def test_mass_factors() -> None:
    assert grams_per_unit("lb") == 453.592
    assert grams_per_unit("kilograms") == 1000
    assert grams_per_unit("eggs") == 50
    assert grams_per_unit("ml") == grams_per_unit("g")
