"""Tests for the static reference tables."""

import pytest

from tedb.errors import UnknownKeyError
from tedb.reference import CATEGORIES, COUNTRIES, lookup


def test_country_lookup_known_codes():
    """Member states map to TEDB ids."""

    assert lookup(COUNTRIES, "AT") == 1
    assert lookup(COUNTRIES, "ES") == 10
    assert lookup(COUNTRIES, "XI") == 30


def test_united_kingdom_is_not_offered():
    """The UK id is left out of the table."""

    assert "UK" not in COUNTRIES
    assert 13 not in COUNTRIES.entries.values()
    with pytest.raises(UnknownKeyError):
        lookup(COUNTRIES, "UK")


def test_lookup_is_case_sensitive():
    """Keys must use the documented spelling."""

    with pytest.raises(UnknownKeyError) as excinfo:
        lookup(COUNTRIES, "es")
    assert excinfo.value.key == "es"
    assert excinfo.value.table == "country"


def test_category_table():
    """Categories use snake_case keys and unique ids."""

    assert lookup(CATEGORIES, "foodstuffs") == 1
    assert lookup(CATEGORIES, "pharmaceutical_products") == 3
    assert len(CATEGORIES) == 49
    assert len(set(CATEGORIES.entries.values())) == len(CATEGORIES)
    with pytest.raises(UnknownKeyError):
        lookup(CATEGORIES, "Foodstuffs")


def test_tables_are_read_only():
    """Tables cannot be mutated after import."""

    with pytest.raises(TypeError):
        COUNTRIES.entries["UK"] = 13  # type: ignore[index]
