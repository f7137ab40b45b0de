"""
Configuration management for the Mongo DB Facade.

This module loads connection settings from defaults, an optional YAML
file and environment variables, and turns the result into a validated
``MongoConfig``.
"""

import os
from copy import deepcopy
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import FacadeConfigError
from .models.connection import MongoConfig


_TRUE_VALUES = ("1", "true", "True", "yes", "Yes")
_FALSE_VALUES = ("0", "false", "False", "no", "No")


class MongoFacadeConfig:
    """
    Configuration for the Mongo DB Facade.

    Settings are resolved in order: built-in defaults, then a YAML file,
    then environment variables. Nested keys can be read with dot notation,
    e.g. ``MongoFacadeConfig.get("connection.max_pool_size")``.
    """

    # Default configuration values
    _default_config: dict[str, object] = {
        "hosts": ["localhost:27017"],
        "auth_enabled": False,
        "user": "",
        "password": "",
        "auth_source": "",
        "tls_enabled": False,
        "tls_insecure_skip_verify": False,
        "database": "test",
        "connect_timeout_ms": 10000,
        "connection": None,
    }

    # Instance configuration values, loaded from file or environment
    _config: dict[str, object] = {}

    # Flag indicating if the configuration has been initialized
    _initialized: bool = False

    @classmethod
    def initialize(cls, config_path: str | None = None) -> None:
        """
        Initialize the configuration.

        Args:
            config_path: Optional path to a YAML configuration file

        Raises:
            FacadeConfigError: If the file is missing or not valid YAML
        """
        # Deep copy so nested sections are never shared with the defaults
        cls._config = deepcopy(cls._default_config)

        if config_path:
            cls._load_from_file(config_path)

        cls._load_from_env()

        cls._initialized = True

    @classmethod
    def _read_yaml(cls, file_path: str) -> dict[str, object]:
        path = Path(file_path)
        if not path.exists():
            raise FacadeConfigError(f"Configuration file not found: {file_path}")

        try:
            with open(path, "r") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise FacadeConfigError(f"Error loading configuration file {file_path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise FacadeConfigError(f"Configuration file {file_path} must contain a mapping")
        return content

    @classmethod
    def _load_from_file(cls, config_path: str) -> None:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file
        """
        cls._config.update(cls._read_yaml(config_path))

    @classmethod
    def _load_from_env(cls) -> None:
        """Load configuration from environment variables."""
        env_hosts = os.environ.get("MONGO_FACADE_HOSTS")
        if env_hosts:
            cls._config["hosts"] = [h.strip() for h in env_hosts.split(",") if h.strip()]

        env_database = os.environ.get("MONGO_FACADE_DATABASE")
        if env_database:
            cls._config["database"] = env_database

        for env_name, key in (
            ("MONGO_FACADE_AUTH_ENABLED", "auth_enabled"),
            ("MONGO_FACADE_TLS_ENABLED", "tls_enabled"),
            ("MONGO_FACADE_TLS_INSECURE", "tls_insecure_skip_verify"),
        ):
            value = os.environ.get(env_name)
            if value in _TRUE_VALUES:
                cls._config[key] = True
            elif value in _FALSE_VALUES:
                cls._config[key] = False

        for env_name, key in (
            ("MONGO_FACADE_USER", "user"),
            ("MONGO_FACADE_PASSWORD", "password"),
            ("MONGO_FACADE_AUTH_SOURCE", "auth_source"),
        ):
            value = os.environ.get(env_name)
            if value:
                cls._config[key] = value

        env_timeout = os.environ.get("MONGO_FACADE_CONNECT_TIMEOUT_MS")
        if env_timeout:
            try:
                cls._config["connect_timeout_ms"] = int(env_timeout)
            except ValueError as e:
                raise FacadeConfigError(
                    f"MONGO_FACADE_CONNECT_TIMEOUT_MS must be an integer, got {env_timeout!r}"
                ) from e

    @classmethod
    def _ensure_initialized(cls) -> None:
        """Ensure the configuration is initialized."""
        if not cls._initialized:
            cls.initialize()

    @classmethod
    def get(cls, key: str, default: object = None) -> object:
        """
        Get a configuration value.

        Args:
            key: The configuration key to retrieve
            default: Default value to return if key is not found

        Returns:
            The configuration value, or default if not found
        """
        cls._ensure_initialized()

        if "." in key:
            value = cls._config
            for part in key.split("."):
                if isinstance(value, dict) and part in value:
                    value = value[part]
                else:
                    return default
            return value

        return cls._config.get(key, default)

    @classmethod
    def get_mongo_config(cls) -> MongoConfig:
        """
        Build a validated connection configuration.

        Returns:
            The merged settings as a ``MongoConfig``

        Raises:
            FacadeConfigError: If the merged settings fail validation
        """
        cls._ensure_initialized()

        try:
            return MongoConfig.model_validate(cls._config)
        except ValidationError as e:
            raise FacadeConfigError(f"Invalid MongoDB configuration: {e}") from e

    @classmethod
    def load_from_secrets_file(cls, file_path: str) -> None:
        """
        Load configuration from a secrets file.

        Mapping sections (such as ``connection``) are merged key by key;
        scalar values replace what is already set.

        Args:
            file_path: Path to the secrets file

        Raises:
            FacadeConfigError: If the file is missing or not valid YAML
        """
        cls._ensure_initialized()

        for section, values in cls._read_yaml(file_path).items():
            current = cls._config.get(section)
            if isinstance(values, dict) and isinstance(current, dict):
                current.update(values)
            else:
                cls._config[section] = values
