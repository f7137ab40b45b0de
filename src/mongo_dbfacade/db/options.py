"""
Translation of a ``MongoConfig`` into ``MongoClient`` keyword options.

Only fields that carry a non-zero value are emitted. Anything left out falls
back to whatever default the installed pymongo release uses.
"""

import logging
from typing import Any

from ..models.connection import ConnectionTuning, MongoConfig


logger = logging.getLogger(__name__)

# Tuning fields copied verbatim when truthy, keyed by driver option name
_TUNING_OPTIONS: dict[str, str] = {
    "min_pool_size": "minPoolSize",
    "max_pool_size": "maxPoolSize",
    "max_connecting": "maxConnecting",
    "max_conn_idle_time_ms": "maxIdleTimeMS",
    "server_selection_timeout_ms": "serverSelectionTimeoutMS",
    "socket_timeout_ms": "socketTimeoutMS",
    "operation_timeout_ms": "timeoutMS",
    "retry_reads": "retryReads",
    "retry_writes": "retryWrites",
    "replica_set_name": "replicaSet",
}


def build_client_options(config: MongoConfig) -> dict[str, Any]:
    """
    Build the keyword arguments for ``pymongo.MongoClient``.

    Args:
        config: The connection configuration

    Returns:
        Dictionary of driver options, suitable for ``MongoClient(**options)``
    """
    options: dict[str, Any] = {
        "host": list(config.hosts),
        "connectTimeoutMS": config.connect_timeout_ms,
    }

    if config.tls_enabled:
        options["tls"] = True
        if config.tls_insecure_skip_verify:
            options["tlsInsecure"] = True
        if config.tls_ca_file:
            options["tlsCAFile"] = config.tls_ca_file

    if config.auth_enabled:
        options["username"] = config.user
        options["password"] = config.password
        if config.auth_source:
            options["authSource"] = config.auth_source

    if config.connection is not None:
        options.update(_tuning_options(config.connection))

    logger.debug(
        "Built MongoClient options: %s",
        sorted(key for key in options if key != "password"),
    )
    return options


def _tuning_options(tuning: ConnectionTuning) -> dict[str, Any]:
    """Map the non-zero tuning fields onto driver option names."""
    options: dict[str, Any] = {}

    for field_name, option_name in _TUNING_OPTIONS.items():
        value = getattr(tuning, field_name)
        if value:
            options[option_name] = value

    if tuning.read_concern_majority:
        options["readConcernLevel"] = "majority"

    if tuning.read_secondary_preferred:
        options["readPreference"] = "secondaryPreferred"

    # wtimeout only means something alongside w=majority
    if tuning.write_concern_majority:
        options["w"] = "majority"
        if tuning.write_concern_timeout_ms:
            options["wTimeoutMS"] = tuning.write_concern_timeout_ms

    return options
