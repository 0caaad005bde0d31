"""
Gateways Package - Infrastructure Layer

Concrete implementations of the domain gateway interfaces.
"""

from .prediction_service_gateway import PredictionServiceGateway

__all__ = ["PredictionServiceGateway"]
