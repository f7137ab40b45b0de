"""
Database integration for the Mongo DB Facade.

This module provides the MongoDB connection helper and client.
"""

from .mongodb import MongoDBClient, connect
from .options import build_client_options

__all__ = ["MongoDBClient", "connect", "build_client_options"]
