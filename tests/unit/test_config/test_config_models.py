"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from aiomilvus.config.models import (
    ClientConfig,
    ConnectionConfig,
    PollingConfig,
    RetryConfig,
)


class TestConnectionConfig:
    """Test ConnectionConfig validation."""

    def test_base_url_includes_port(self) -> None:
        """base_url should join endpoint and port."""
        config = ConnectionConfig(endpoint="http://milvus", port=19121)
        assert config.base_url == "http://milvus:19121"

    def test_trailing_slash_stripped(self) -> None:
        """A trailing slash on the endpoint should be removed."""
        assert ConnectionConfig(endpoint="https://milvus/").endpoint == "https://milvus"

    def test_endpoint_requires_scheme(self) -> None:
        """Endpoints without http(s) scheme should be rejected."""
        with pytest.raises(ValidationError):
            ConnectionConfig(endpoint="milvus:19530")

    def test_port_range(self) -> None:
        """Ports outside 1-65535 should be rejected."""
        with pytest.raises(ValidationError):
            ConnectionConfig(port=0)
        with pytest.raises(ValidationError):
            ConnectionConfig(port=70000)

    def test_blank_database_rejected(self) -> None:
        """A blank database name is invalid."""
        with pytest.raises(ValidationError):
            ConnectionConfig(database="  ")


class TestPollingConfig:
    """Test PollingConfig."""

    def test_to_poll_config(self) -> None:
        """to_poll_config should carry interval and timeout."""
        poll_config = PollingConfig(
            waiting_interval_seconds=2.0, timeout_seconds=30.0
        ).to_poll_config()
        assert poll_config.waiting_interval == 2.0
        assert poll_config.timeout == 30.0
        assert poll_config.progress is None
        assert poll_config.cancel_event is None

    def test_negative_timeout_rejected(self) -> None:
        """A negative timeout is invalid."""
        with pytest.raises(ValidationError):
            PollingConfig(timeout_seconds=-1)


class TestRetryConfig:
    """Test RetryConfig bounds."""

    def test_max_tries_at_least_one(self) -> None:
        """max_tries must allow at least the first attempt."""
        with pytest.raises(ValidationError):
            RetryConfig(max_tries=0)


class TestClientConfig:
    """Test root configuration."""

    def test_nested_defaults(self) -> None:
        """All sections should have defaults."""
        config = ClientConfig()
        assert config.connection.database is None
        assert config.retry.max_tries == 3
        assert config.logging.format == "console"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Nested values can be set through prefixed environment variables."""
        monkeypatch.setenv("AIOMILVUS_CONNECTION__PORT", "19121")
        monkeypatch.setenv("AIOMILVUS_POLLING__TIMEOUT_SECONDS", "45")

        config = ClientConfig()

        assert config.connection.port == 19121
        assert config.polling.timeout_seconds == 45
