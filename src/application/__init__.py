"""
Application Layer Package

Use cases and DTOs for the weather endpoint, the energy record scheduler,
the backfill command and the health endpoint.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
