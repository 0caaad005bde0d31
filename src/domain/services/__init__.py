"""Domain services: preset lookup, snapshot synthesis and series reconciliation."""

from .preset_catalog import COUNTRY_PRESETS, YEAR_OPTIONS, PresetCatalog
from .series_reconciler import ACTUAL_SPI_SERIES, reconcile
from .snapshot_synthesizer import FORECAST_HORIZON, synthesize

__all__ = [
    "COUNTRY_PRESETS",
    "YEAR_OPTIONS",
    "PresetCatalog",
    "ACTUAL_SPI_SERIES",
    "reconcile",
    "FORECAST_HORIZON",
    "synthesize",
]
