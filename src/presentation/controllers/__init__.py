"""
Controllers Package - Presentation Layer

FastAPI routers. Controllers validate input, map application errors to HTTP
status codes and delegate to the use cases resolved from the container.
"""

from .catalog_controller import router as catalog_router
from .forecasts_controller import router as forecasts_router
from .system_controller import router as system_router
from .timeline_controller import router as timeline_router

__all__ = ["catalog_router", "forecasts_router", "timeline_router", "system_router"]
