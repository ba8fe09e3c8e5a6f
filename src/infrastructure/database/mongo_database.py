"""
MongoDB Database - Infrastructure Layer

This module provides a MongoDB database client for interacting with MongoDB.
It handles connection, collections, and the handful of operations the
energy record repository needs.
"""

from typing import Any, Dict, List, Optional, Sequence

import pymongo.errors
import structlog
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = structlog.get_logger(__name__)

ENERGY_RECORDS_COLLECTION = "energy_generation_records"


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri, tz_aware=True)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = ASCENDING,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: Sort direction (1 for ascending, -1 for descending)
            skip: Number of documents to skip
            limit: Maximum number of documents to return

        Returns:
            List of documents
        """
        cursor = self.db[collection_name].find(query)

        if sort_by:
            cursor = cursor.sort(sort_by, sort_direction)

        cursor = cursor.skip(skip).limit(limit)

        return list(cursor)

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a document into a collection.

        Raises:
            Exception: If the insert is not acknowledged
        """
        result = self.db[collection_name].insert_one(document)
        if not result.acknowledged:
            raise Exception(f"Failed to insert document in {collection_name}")
        return document

    async def insert_many(
        self, collection_name: str, documents: Sequence[Dict[str, Any]]
    ) -> int:
        """
        Insert documents in one unordered batch.

        Returns:
            Number of inserted documents
        """
        if not documents:
            return 0
        result = self.db[collection_name].insert_many(list(documents), ordered=False)
        if not result.acknowledged:
            raise Exception(f"Failed to insert documents in {collection_name}")
        return len(result.inserted_ids)

    async def delete_many(self, collection_name: str, query: Dict[str, Any]) -> int:
        """
        Delete every document matching ``query``.

        Returns:
            Number of deleted documents
        """
        result = self.db[collection_name].delete_many(query)
        return result.deleted_count

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    def _safe_drop_index(self, collection_name: str, index_name: str) -> None:
        try:
            self.db[collection_name].drop_index(index_name)
        except pymongo.errors.OperationFailure:
            # Index doesn't exist, nothing to do
            pass

    async def create_indexes(self) -> None:
        """
        Create the indexes used by the energy record queries.
        Called during application startup.
        """
        collection_name = ENERGY_RECORDS_COLLECTION

        self._safe_drop_index(collection_name, "serial_timestamp_idx")
        self._safe_drop_index(collection_name, "record_id_idx")

        try:
            self.db[collection_name].create_index(
                "id", name="record_id_idx", unique=True
            )
            self.db[collection_name].create_index(
                [("serialNumber", ASCENDING), ("timestamp", DESCENDING)],
                name="serial_timestamp_idx",
                background=True,
            )
        except pymongo.errors.OperationFailure as e:
            logger.warning("mongo.create_indexes_failed", error=str(e))
