"""Async client for the Milvus vector database."""

from aiomilvus.client import MilvusClient
from aiomilvus.collection import MilvusCollection
from aiomilvus.config.models import ClientConfig
from aiomilvus.database import MilvusDatabase
from aiomilvus.errors import (
    MilvusClientError,
    MilvusError,
    PollCancelledError,
    PollTimeoutError,
    RequestValidationError,
    TransportError,
)
from aiomilvus.utils.polling import PollConfig, poll

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "MilvusClient",
    "MilvusClientError",
    "MilvusCollection",
    "MilvusDatabase",
    "MilvusError",
    "PollCancelledError",
    "PollConfig",
    "PollTimeoutError",
    "RequestValidationError",
    "TransportError",
    "__version__",
    "poll",
]
