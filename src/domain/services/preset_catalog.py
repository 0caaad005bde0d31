"""
Domain Service - Preset Catalog

Baseline economic profiles per selectable country. The table is built once
at import time and exposed read-only.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

from src.domain.entities.errors import UnknownCountryError
from src.domain.entities.profile import EconomicProfile

COUNTRY_PRESETS: Mapping[str, EconomicProfile] = MappingProxyType(
    {
        "Finland": EconomicProfile(
            food=320, rent=850, energy=160, transport=140, debt=200, income=3400
        ),
        "Germany": EconomicProfile(
            food=310, rent=750, energy=150, transport=130, debt=180, income=3300
        ),
        "USA": EconomicProfile(
            food=360, rent=950, energy=200, transport=170, debt=250, income=5000
        ),
        "Romania": EconomicProfile(
            food=260, rent=450, energy=120, transport=100, debt=90, income=2000
        ),
    }
)

YEAR_OPTIONS: Tuple[int, ...] = (2020, 2021, 2022, 2023, 2024, 2025)


class PresetCatalog:
    """Read-only lookup of country baselines."""

    def __init__(self, presets: Mapping[str, EconomicProfile] = COUNTRY_PRESETS):
        negative = [name for name, profile in presets.items() if profile.has_negative_values()]
        if negative:
            raise ValueError(f"Preset baselines must be non-negative: {negative}")
        self._presets = MappingProxyType(dict(presets))

    def lookup(self, country_id: str) -> EconomicProfile:
        try:
            return self._presets[country_id]
        except KeyError:
            raise UnknownCountryError(country_id) from None

    def countries(self) -> List[str]:
        return list(self._presets)


def lookup(country_id: str) -> EconomicProfile:
    """Look up a baseline in the default catalog."""
    return PresetCatalog().lookup(country_id)
