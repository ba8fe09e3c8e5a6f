"""
Database package - Infrastructure Layer

MongoDB connection wrapper used by the energy record repository and by the
health check service.
"""

from src.infrastructure.database.mongo_database import (
    ENERGY_RECORDS_COLLECTION,
    MongoDatabase,
)

__all__ = ["ENERGY_RECORDS_COLLECTION", "MongoDatabase"]
