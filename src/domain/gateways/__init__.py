"""
Gateways Package - Domain Layer

Interfaces for external service communication. Implementations live in the
infrastructure layer.
"""

from .forecast_gateway import IForecastGateway

__all__ = ["IForecastGateway"]
