"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses,
including API routes, controllers, and middleware.
"""

from src.presentation import controllers
from src.presentation.middleware import RequestLoggingMiddleware

__all__ = ["controllers", "RequestLoggingMiddleware"]
