"""
Use Cases Package - Application Layer

Entry points invoked by the controllers.
"""

from .forecast_use_cases import (
    CancelForecastUseCase,
    GetCatalogUseCase,
    GetForecastStateUseCase,
    GetTimelineUseCase,
    RequestForecastUseCase,
)
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase

__all__ = [
    "GetCatalogUseCase",
    "RequestForecastUseCase",
    "CancelForecastUseCase",
    "GetForecastStateUseCase",
    "GetTimelineUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
