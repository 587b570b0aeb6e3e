"""Shared pytest fixtures for aiomilvus tests."""

import io
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from loguru import logger

from aiomilvus.client import MilvusClient
from aiomilvus.config.models import ClientConfig, PollingConfig


@pytest.fixture
def log_capture() -> Generator[io.StringIO, None, None]:
    """Capture loguru output to a string buffer."""
    string_io = io.StringIO()
    handler_id = logger.add(string_io, format="{level} {message}")
    yield string_io
    logger.remove(handler_id)


@pytest.fixture
def transport() -> MagicMock:
    """Transport double whose invoke() returns an empty successful body."""
    fake = MagicMock()
    fake.address = "http://milvus.test:9091"
    fake.invoke = AsyncMock(return_value={"status": {}})
    fake.close = AsyncMock()
    return fake


@pytest.fixture
def client_config() -> ClientConfig:
    """Config with fast polling so wait operations finish quickly."""
    return ClientConfig(polling=PollingConfig(waiting_interval_seconds=0.001))


@pytest.fixture
def client(client_config: ClientConfig, transport: MagicMock) -> MilvusClient:
    """Client wired to the transport double."""
    return MilvusClient(client_config, transport=transport)
