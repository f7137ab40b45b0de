"""
Configuration models for the Mongo DB Facade.

This module provides the typed records that describe a MongoDB connection.
"""

from .connection import ConnectionTuning, MongoConfig

__all__ = ["ConnectionTuning", "MongoConfig"]
