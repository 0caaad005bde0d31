"""Application services holding per-session state."""

from .forecast_orchestrator import ForecastOrchestrator

__all__ = ["ForecastOrchestrator"]
