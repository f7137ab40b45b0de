"""
Mongo DB Facade - a thin configuration and CRUD layer over pymongo.

This package turns a typed connection configuration into MongoClient
options, connects and pings the server, and forwards single-document and
multi-document CRUD calls to the driver.
"""

from .config import MongoFacadeConfig
from .db import MongoDBClient, build_client_options, connect
from .errors import (
    ConnectionEstablishmentError,
    FacadeConfigError,
    LivenessProbeError,
    MongoFacadeError,
)
from .models import ConnectionTuning, MongoConfig

__version__ = "0.1.0"


def connect_from_config(config_path: str | None = None) -> MongoDBClient:
    """
    Load configuration from ``config_path`` and the environment, then connect.

    Args:
        config_path: Optional path to a YAML configuration file

    Returns:
        A connected ``MongoDBClient``
    """
    MongoFacadeConfig.initialize(config_path)
    return connect(MongoFacadeConfig.get_mongo_config())


__all__ = [
    "MongoFacadeConfig",
    "MongoConfig",
    "ConnectionTuning",
    "MongoDBClient",
    "connect",
    "connect_from_config",
    "build_client_options",
    "MongoFacadeError",
    "ConnectionEstablishmentError",
    "LivenessProbeError",
    "FacadeConfigError",
]
