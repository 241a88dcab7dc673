"""Static lookup tables mapping readable keys to TEDB internal ids."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .errors import UnknownKeyError


@dataclass(frozen=True)
class ReferenceTable:
    name: str
    entries: Mapping[str, int]

    def lookup(self, key: str) -> int:
        try:
            return self.entries[key]
        except KeyError:
            raise UnknownKeyError(self.name, key) from None

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


def _table(name: str, entries: dict[str, int]) -> ReferenceTable:
    return ReferenceTable(name=name, entries=MappingProxyType(dict(entries)))


# Member states as numbered by TEDB. Id 13 was the United Kingdom and is not
# offered.
COUNTRIES = _table(
    "country",
    {
        "AT": 1,
        "BE": 2,
        "BG": 3,
        "CY": 4,
        "CZ": 5,
        "DE": 6,
        "DK": 7,
        "EE": 8,
        "EL": 9,
        "ES": 10,
        "FI": 11,
        "FR": 12,
        "HR": 14,
        "HU": 15,
        "IE": 16,
        "IT": 17,
        "LT": 18,
        "LU": 19,
        "LV": 20,
        "MT": 21,
        "NL": 22,
        "PL": 23,
        "PT": 24,
        "RO": 25,
        "SE": 26,
        "SI": 27,
        "SK": 28,
        "XI": 30,
    },
)

CATEGORIES = _table(
    "category",
    {
        "foodstuffs": 1,
        "water_supplies": 2,
        "pharmaceutical_products": 3,
        "medical_equipment_for_disabled_persons": 4,
        "children_car_seats": 5,
        "transport_of_passengers": 6,
        "books": 7,
        "newspapers": 8,
        "periodicals": 9,
        "admission_to_cultural_events": 10,
        "admission_to_amusement_parks": 11,
        "pay_and_cable_tv": 12,
        "tv_licence": 13,
        "writers_composers": 14,
        "social_housing": 15,
        "renovation_and_repairing_of_private_dwellings": 16,
        "window_cleaning_and_cleaning_in_private_households": 17,
        "agricultural_inputs": 18,
        "accommodation_in_hotels": 19,
        "restaurant_and_catering_services": 20,
        "admission_to_sporting_events": 21,
        "use_of_sporting_facilities": 22,
        "social_services": 23,
        "supplies_by_undertakers_and_cremation_services": 24,
        "medical_and_dental_care": 25,
        "street_cleaning_and_refuse_collection": 26,
        "minor_repairing_of_bicycles": 27,
        "minor_repairing_of_shoes_and_leather_goods": 28,
        "minor_repairing_of_clothing_and_household_linen": 29,
        "domestic_care_services": 30,
        "hairdressing": 31,
        "electricity": 32,
        "natural_gas": 33,
        "district_heating": 34,
        "firewood": 35,
        "flowers_and_plants": 36,
        "children_clothing_and_footwear": 37,
        "bicycles": 38,
        "works_of_art_and_antiques": 39,
        "electronic_books": 40,
        "electronic_newspapers": 41,
        "electronic_periodicals": 42,
        "live_animals": 43,
        "solar_panels": 44,
        "admission_to_zoos": 45,
        "herbicides_and_pesticides": 46,
        "legal_services": 47,
        "heat_pumps": 48,
        "broadcasting_services": 49,
    },
)


def lookup(table: ReferenceTable, key: str) -> int:
    """Return the id for ``key``; lookups are exact and case-sensitive."""

    return table.lookup(key)
