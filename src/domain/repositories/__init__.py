"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .energy_record_repository import IEnergyGenerationRecordRepository

__all__ = ["IEnergyGenerationRecordRepository"]
