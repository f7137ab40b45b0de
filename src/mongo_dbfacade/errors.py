"""
Error types raised by the Mongo DB Facade.

Connection failures are split by phase so callers can tell a client that
never came up from one that came up but could not reach a server. Errors
raised by individual CRUD calls are the driver's own and are not wrapped.
"""


class MongoFacadeError(Exception):
    """Base class for errors raised by this package."""


class ConnectionEstablishmentError(MongoFacadeError):
    """The driver client could not be constructed from the configuration."""

    def __init__(self, hosts: list[str], cause: BaseException) -> None:
        self.hosts = list(hosts)
        self.cause = cause
        super().__init__(f"Failed to establish MongoDB connection to {self.hosts}: {cause}")


class LivenessProbeError(MongoFacadeError):
    """The client was constructed but the ping against the primary failed."""

    def __init__(self, hosts: list[str], cause: BaseException) -> None:
        self.hosts = list(hosts)
        self.cause = cause
        super().__init__(f"MongoDB ping failed for {self.hosts}: {cause}")


class FacadeConfigError(MongoFacadeError):
    """Configuration could not be loaded or validated."""
