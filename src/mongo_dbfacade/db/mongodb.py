"""
MongoDB client for the Mongo DB Facade.

This module connects to MongoDB using the pymongo driver and exposes a
small set of single-document and multi-document CRUD operations. Every
operation is a direct call to the driver; driver errors propagate to the
caller unchanged.

Per-call deadlines are set by the caller with the driver's own context
manager::

    with pymongo.timeout(5):
        client.read("widgets", {"name": "a"})
"""

import logging
from collections.abc import Mapping
from typing import Any

import pymongo
from pymongo import MongoClient, ReadPreference
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..errors import ConnectionEstablishmentError, LivenessProbeError
from ..models.connection import MongoConfig
from .options import build_client_options


logger = logging.getLogger(__name__)

Document = Mapping[str, Any]


def connect(config: MongoConfig) -> "MongoDBClient":
    """
    Open a connection described by ``config`` and verify it with a ping.

    The ping targets the primary and must finish within
    ``config.connect_timeout_ms``.

    Args:
        config: The connection configuration

    Returns:
        A client bound to ``config.database``

    Raises:
        ConnectionEstablishmentError: If the driver client cannot be created
        LivenessProbeError: If the client was created but the ping failed
    """
    options = build_client_options(config)
    logger.debug("Connecting to MongoDB at %s", config.hosts)

    try:
        client: MongoClient = MongoClient(**options)
    except (PyMongoError, ValueError, TypeError) as e:
        raise ConnectionEstablishmentError(config.hosts, e) from e

    try:
        with pymongo.timeout(config.connect_timeout_ms / 1000):
            client.admin.command("ping", read_preference=ReadPreference.PRIMARY)
    except PyMongoError as e:
        client.close()
        raise LivenessProbeError(config.hosts, e) from e

    logger.info("Connected to MongoDB at %s, database %r", config.hosts, config.database)
    return MongoDBClient(client[config.database], client)


class MongoDBClient:
    """
    MongoDB client for the Mongo DB Facade.

    Wraps one ``Database`` handle. Instances are normally created by
    ``connect``; the handle is never reassigned, so a single instance can be
    shared between threads as far as pymongo allows.
    """

    def __init__(self, database: Database, client: MongoClient | None = None) -> None:
        """
        Initialize the MongoDB client.

        Args:
            database: Database handle every operation runs against
            client: Owning driver client, closed by ``close``
        """
        self._database = database
        self._client = client

    @property
    def database(self) -> Database:
        """The database this client is bound to."""
        return self._database

    def create_one(self, collection: str, document: Document) -> None:
        """
        Insert a single document.

        Args:
            collection: Name of the target collection
            document: Document to insert
        """
        self._database[collection].insert_one(document)

    def read_one(self, collection: str, query: Document) -> dict[str, Any] | None:
        """
        Find a single document.

        Args:
            collection: Name of the collection to search
            query: Filter selecting the document

        Returns:
            The first matching document, or None if nothing matched
        """
        return self._database[collection].find_one(query)

    def read(self, collection: str, query: Document) -> list[dict[str, Any]] | None:
        """
        Find every document matching ``query``.

        Args:
            collection: Name of the collection to search
            query: Filter selecting the documents

        Returns:
            List of matching documents, or None if nothing matched
        """
        return self._find_all(collection, query, None)

    def read_with_projection(
        self,
        collection: str,
        query: Document,
        projection: Document
    ) -> list[dict[str, Any]] | None:
        """
        Find every document matching ``query``, returning only projected fields.

        Args:
            collection: Name of the collection to search
            query: Filter selecting the documents
            projection: Fields to include or exclude

        Returns:
            List of projected documents, or None if nothing matched
        """
        return self._find_all(collection, query, projection)

    def update_one(self, collection: str, query: Document, fields: Document) -> None:
        """
        Apply an update to the first document matching ``query``.

        Whether anything matched is not reported.

        Args:
            collection: Name of the target collection
            query: Filter selecting the document
            fields: Update document, e.g. ``{"$set": {...}}``
        """
        self._database[collection].update_one(query, fields)

    def delete_one(self, collection: str, query: Document) -> int:
        """
        Delete the first document matching ``query``.

        Args:
            collection: Name of the target collection
            query: Filter selecting the document

        Returns:
            Number of deleted documents, 0 when nothing matched
        """
        result = self._database[collection].delete_one(query)
        return result.deleted_count

    def close(self) -> None:
        """
        Close the underlying driver client.
        """
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")

    def _find_all(
        self,
        collection: str,
        query: Document,
        projection: Document | None
    ) -> list[dict[str, Any]] | None:
        cursor = self._database[collection].find(query, projection)
        try:
            results = list(cursor)
        finally:
            cursor.close()

        if not results:
            return None
        return results
