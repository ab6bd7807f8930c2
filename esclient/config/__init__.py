"""
Configuration management for esclient.
"""

from esclient.config.settings import (
    ClientConfig,
    ConnectionConfig,
    LoggingConfig,
    configure_logging,
    get_default_config,
    load_config,
)

__all__ = [
    "ClientConfig",
    "ConnectionConfig",
    "LoggingConfig",
    "configure_logging",
    "get_default_config",
    "load_config",
]
