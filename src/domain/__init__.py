"""
Domain Layer Package

Core rules of the SPI forecast pipeline: entities, the preset catalog,
snapshot synthesis, series reconciliation and gateway contracts. Nothing in
here depends on HTTP clients or the web framework.
"""

# Re-export submodules
from src.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "services", "ports"]
