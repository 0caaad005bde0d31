"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnknownCountryError(DomainError):
    """Raised when a country is not part of the preset catalog."""

    def __init__(self, country_id: str, details: Optional[Dict[str, Any]] = None):
        self.country_id = country_id
        super().__init__(f"Unknown country: {country_id}", details)


class ForecastInFlightError(DomainError):
    """Raised when a forecast is requested while another one is still running."""

    def __init__(self, country_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"A forecast request is already in flight (requested: {country_id})"
        super().__init__(message, details)


class ForecastClientError(DomainError):
    """Base class for failures of the external prediction service call."""

    kind = "client_error"


class ForecastTransportError(ForecastClientError):
    """Connectivity problem or timeout while talking to the prediction service."""

    kind = "transport_error"


class ForecastServerError(ForecastClientError):
    """The prediction service answered with a non-success status."""

    kind = "server_error"

    def __init__(
        self,
        message: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        super().__init__(message, details)


class MalformedForecastResponseError(ForecastClientError):
    """The prediction service answered with a body of the wrong shape."""

    kind = "malformed_response"
