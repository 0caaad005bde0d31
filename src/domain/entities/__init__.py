"""
Domain Entities Package

This package contains the core domain entities of the SPI forecast pipeline.
"""

from .errors import (
    DomainError,
    ForecastClientError,
    ForecastInFlightError,
    ForecastServerError,
    ForecastTransportError,
    MalformedForecastResponseError,
    UnknownCountryError,
)
from .forecast import ForecastResult, RequestState, RequestStatus, TimelineSeries
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .profile import EconomicProfile, SnapshotBatch

__all__ = [
    "EconomicProfile",
    "SnapshotBatch",
    "ForecastResult",
    "RequestState",
    "RequestStatus",
    "TimelineSeries",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "UnknownCountryError",
    "ForecastInFlightError",
    "ForecastClientError",
    "ForecastTransportError",
    "ForecastServerError",
    "MalformedForecastResponseError",
]
