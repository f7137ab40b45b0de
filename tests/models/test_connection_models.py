"""
Tests for the connection configuration models.
"""

import pytest
from pydantic import ValidationError

from mongo_dbfacade.models import ConnectionTuning, MongoConfig


def test_defaults_defer_to_driver() -> None:
    """Every tuning field defaults to its zero value."""
    tuning = ConnectionTuning()

    for name, value in tuning.model_dump().items():
        assert not value, name


def test_config_is_frozen() -> None:
    """Configurations cannot be changed after construction."""
    config = MongoConfig(hosts=["localhost:27017"], database="testdb")

    with pytest.raises(ValidationError):
        config.database = "other"


def test_password_hidden_from_repr() -> None:
    config = MongoConfig(auth_enabled=True, user="svc", password="s3cret")

    assert "s3cret" not in repr(config)


def test_empty_hosts_allowed() -> None:
    """Host lists are not checked here; the driver rejects them on connect."""
    assert MongoConfig(hosts=[]).hosts == []


def test_negative_pool_size_rejected() -> None:
    with pytest.raises(ValidationError):
        ConnectionTuning(max_pool_size=-1)


def test_unknown_field_rejected() -> None:
    with pytest.raises(ValidationError):
        MongoConfig(hostz=["localhost:27017"])
