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


class WeatherValidationError(DomainError):
    """Raised when a weather request is missing required coordinates."""

    def __init__(
        self,
        message: str = "Latitude and longitude are required",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


class WeatherUpstreamError(DomainError):
    """Raised when the weather provider answers with a non-success status."""

    def __init__(
        self,
        status_text: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_text = status_text
        self.status_code = status_code
        super().__init__(f"Open-Meteo API error: {status_text}", details)


class WeatherInternalError(DomainError):
    """Raised for network, parsing or unexpected failures on the weather path."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class EnergyRecordPersistenceError(DomainError):
    """Raised when energy generation records cannot be read or written."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
