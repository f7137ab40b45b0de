"""
Connection configuration models for the Mongo DB Facade.

Zero values (``0``, ``False``, ``""``) in these models mean "use the
driver's default": the options builder skips them entirely rather than
passing them to ``MongoClient``.
"""

from pydantic import BaseModel, ConfigDict, Field


class ConnectionTuning(BaseModel):
    """
    Optional per-connection tuning knobs.

    Durations are in milliseconds. Pool sizes are counts per server.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Pool sizing
    min_pool_size: int = Field(default=0, ge=0)
    max_pool_size: int = Field(default=0, ge=0)
    max_connecting: int = Field(default=0, ge=0)

    # Timeouts
    max_conn_idle_time_ms: int = 0
    server_selection_timeout_ms: int = 0
    socket_timeout_ms: int = 0
    operation_timeout_ms: int = 0

    # Retries
    retry_reads: bool = False
    retry_writes: bool = False

    # Consistency
    read_concern_majority: bool = False
    read_secondary_preferred: bool = False
    write_concern_majority: bool = False
    write_concern_timeout_ms: int = 0

    replica_set_name: str = ""


class MongoConfig(BaseModel):
    """
    Everything needed to open a connection to a MongoDB deployment.

    Credentials are only used when ``auth_enabled`` is set. TLS certificate
    verification stays on unless ``tls_insecure_skip_verify`` is given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hosts: list[str] = Field(default_factory=list)
    auth_enabled: bool = False
    user: str = ""
    password: str = Field(default="", repr=False)
    auth_source: str = ""
    tls_enabled: bool = False
    tls_insecure_skip_verify: bool = False
    tls_ca_file: str | None = None
    database: str = ""
    connect_timeout_ms: int = Field(default=10000, gt=0)
    connection: ConnectionTuning | None = None
