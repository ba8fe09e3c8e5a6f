"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error handling, and mapping between API DTOs
and application layer use cases.
"""

from .energy_records_controller import router as energy_records_router
from .health_controller import router as health_router
from .weather_controller import router as weather_router

__all__ = ["energy_records_router", "health_router", "weather_router"]
