"""
Pytest configuration for Mongo DB Facade tests.
"""

import os
from typing import Generator

import mongomock
import pytest

from mongo_dbfacade.config import MongoFacadeConfig
from mongo_dbfacade.db.mongodb import MongoDBClient


FACADE_ENV_VARS = [
    "MONGO_FACADE_HOSTS",
    "MONGO_FACADE_DATABASE",
    "MONGO_FACADE_AUTH_ENABLED",
    "MONGO_FACADE_USER",
    "MONGO_FACADE_PASSWORD",
    "MONGO_FACADE_AUTH_SOURCE",
    "MONGO_FACADE_TLS_ENABLED",
    "MONGO_FACADE_TLS_INSECURE",
    "MONGO_FACADE_CONNECT_TIMEOUT_MS",
]


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """
    Remove facade environment variables for the duration of a test.

    The configuration class state is reset as well, and the original
    environment is restored afterward.
    """
    original_env = {key: os.environ.get(key) for key in FACADE_ENV_VARS}
    for key in FACADE_ENV_VARS:
        os.environ.pop(key, None)
    MongoFacadeConfig._config = {}
    MongoFacadeConfig._initialized = False

    yield

    for key, value in original_env.items():
        if value is not None:
            os.environ[key] = value
        else:
            os.environ.pop(key, None)
    MongoFacadeConfig._config = {}
    MongoFacadeConfig._initialized = False


@pytest.fixture
def mock_client() -> MongoDBClient:
    """Provide a facade client backed by an in-memory mongomock database."""
    client = mongomock.MongoClient()
    return MongoDBClient(client["testdb"], client)
