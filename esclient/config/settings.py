"""
Configuration management for esclient.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

from esclient.exceptions import InvalidConfigurationError
from esclient.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "~/.esclient/config.yaml"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"json", "console"}


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Examples:
        "${ES_URL}" -> value of ES_URL env var
        "${ES_URL:http://localhost:9200}" -> value of ES_URL or the default
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def _none_if_empty(value: Any) -> Any:
    # An unset ${VAR} expands to "", which means "not configured"
    if value == "":
        return None
    return value


@dataclass
class ConnectionConfig:
    """Connection settings for the search service."""

    url: str = "http://localhost:9200"
    username: Optional[str] = None
    password: Optional[str] = None
    api_key: Optional[str] = None
    timeout: float = 30.0
    verify_certs: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: Optional[str] = None
    format: str = "json"  # "json" or "console"


@dataclass
class ClientConfig:
    """Top-level esclient configuration."""

    connection: ConnectionConfig = field(default_factory=ConnectionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config() -> ClientConfig:
    """Return the configuration used when no file is present."""
    return ClientConfig()


def configure_logging(config: LoggingConfig) -> None:
    """Apply a :class:`LoggingConfig` to the process-wide logging setup."""
    setup_logging(
        level=config.level,
        log_file=Path(config.file).expanduser() if config.file else None,
        json_format=config.format == "json",
    )


def load_config(config_path: Optional[str] = None) -> ClientConfig:
    """
    Load configuration from a YAML file.

    A missing or empty file yields the defaults.

    Args:
        config_path: Path to the YAML file. Defaults to ``~/.esclient/config.yaml``.

    Returns:
        ClientConfig: Validated configuration object

    Raises:
        InvalidConfigurationError: If the file cannot be parsed or fails validation
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': top level must be a mapping"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError as e:
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> ClientConfig:
    """
    Build ClientConfig from a dictionary, merging it over the defaults.

    Raises:
        InvalidConfigurationError: If a section or value has the wrong type
    """
    defaults = get_default_config()

    connection_data = config_data.get('connection') or {}
    if not isinstance(connection_data, dict):
        raise InvalidConfigurationError("'connection' section must be a mapping")

    try:
        timeout = float(connection_data.get('timeout', defaults.connection.timeout))
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"connection.timeout must be a number: {e}") from e

    verify_certs = connection_data.get('verify_certs', defaults.connection.verify_certs)
    if isinstance(verify_certs, str):
        verify_certs = verify_certs.strip().lower() in ("1", "true", "yes", "on")

    connection = ConnectionConfig(
        url=connection_data.get('url') or defaults.connection.url,
        username=_none_if_empty(connection_data.get('username', defaults.connection.username)),
        password=_none_if_empty(connection_data.get('password', defaults.connection.password)),
        api_key=_none_if_empty(connection_data.get('api_key', defaults.connection.api_key)),
        timeout=timeout,
        verify_certs=bool(verify_certs),
    )

    logging_data = config_data.get('logging') or {}
    if not isinstance(logging_data, dict):
        raise InvalidConfigurationError("'logging' section must be a mapping")

    log_file = _none_if_empty(logging_data.get('file', defaults.logging.file))
    logging = LoggingConfig(
        level=str(logging_data.get('level', defaults.logging.level)).upper(),
        file=os.path.expanduser(log_file) if log_file else None,
        format=str(logging_data.get('format', defaults.logging.format)).lower(),
    )

    return ClientConfig(connection=connection, logging=logging)


def _validate_config(config: ClientConfig) -> None:
    """
    Validate configuration values.

    Raises:
        InvalidConfigurationError: If any value is out of range or inconsistent
    """
    parsed = urlparse(config.connection.url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidConfigurationError(
            f"connection.url must be an http(s) URL, got '{config.connection.url}'"
        )

    if config.connection.timeout <= 0:
        raise InvalidConfigurationError(
            f"connection.timeout must be positive, got {config.connection.timeout}"
        )

    if config.connection.password is not None and config.connection.username is None:
        raise InvalidConfigurationError("connection.password requires connection.username")

    if config.connection.api_key is not None and config.connection.username is not None:
        raise InvalidConfigurationError(
            "connection.api_key and connection.username are mutually exclusive"
        )

    if config.logging.level not in _LOG_LEVELS:
        raise InvalidConfigurationError(
            f"logging.level must be one of {sorted(_LOG_LEVELS)}, got '{config.logging.level}'"
        )

    if config.logging.format not in _LOG_FORMATS:
        raise InvalidConfigurationError(
            f"logging.format must be one of {sorted(_LOG_FORMATS)}, got '{config.logging.format}'"
        )
