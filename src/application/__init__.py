"""
Application Layer Package

Use cases, DTOs and the forecast orchestrator. This layer coordinates the
domain services and gateways to serve the presentation layer.
"""

# Re-export submodules
from src.application import dtos, models, services, use_cases

__all__ = ["dtos", "use_cases", "models", "services"]
