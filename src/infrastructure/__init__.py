"""
Infrastructure Layer Package

Implementations of the domain gateway and port interfaces that talk to the
outside world over HTTP.
"""

from src.infrastructure import gateways, services

__all__ = ["gateways", "services"]
