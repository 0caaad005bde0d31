"""Infrastructure services package."""

from .health_check_service import HealthCheckService

__all__ = ["HealthCheckService"]
