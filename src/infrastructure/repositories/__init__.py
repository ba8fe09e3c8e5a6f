"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer.
"""

from .energy_record_repository import EnergyGenerationRecordRepository

__all__ = ["EnergyGenerationRecordRepository"]
