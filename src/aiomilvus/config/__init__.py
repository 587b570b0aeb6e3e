"""Configuration management for aiomilvus."""

from aiomilvus.config.loader import load_config
from aiomilvus.config.models import (
    ClientConfig,
    ConnectionConfig,
    LoggingConfig,
    PollingConfig,
    RetryConfig,
)

__all__ = [
    "ClientConfig",
    "ConnectionConfig",
    "LoggingConfig",
    "PollingConfig",
    "RetryConfig",
    "load_config",
]
