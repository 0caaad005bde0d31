"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .catalog_dto import CatalogResponseDTO, EconomicProfileDTO
from .forecast_dto import ForecastRequestDTO, RequestStateDTO, SeriesDTO, TimelineDTO
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO

__all__ = [
    "CatalogResponseDTO",
    "EconomicProfileDTO",
    "ForecastRequestDTO",
    "RequestStateDTO",
    "SeriesDTO",
    "TimelineDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
