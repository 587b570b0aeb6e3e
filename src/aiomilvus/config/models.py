"""Pydantic configuration models for aiomilvus."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from aiomilvus.utils.polling import PollConfig


class ConnectionConfig(BaseModel):
    """Milvus REST endpoint configuration."""

    endpoint: str = "http://localhost"
    port: int = Field(default=9091, ge=1, le=65535)
    database: str | None = None
    timeout_seconds: float = Field(default=30.0, gt=0.0, le=600.0)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate URL scheme and strip trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("database")
    @classmethod
    def validate_database(cls, v: str | None) -> str | None:
        """Reject blank database names."""
        if v is not None and not v.strip():
            raise ValueError("database must not be blank")
        return v

    @property
    def base_url(self) -> str:
        """Endpoint with port, without the API prefix."""
        return f"{self.endpoint}:{self.port}"


class PollingConfig(BaseModel):
    """Defaults for operations that wait on a long-running remote state."""

    waiting_interval_seconds: float = Field(default=0.5, ge=0.0, le=60.0)
    timeout_seconds: float | None = Field(default=None, ge=0.0)

    def to_poll_config(self) -> PollConfig:
        """Build a PollConfig carrying these defaults."""
        return PollConfig(
            waiting_interval=self.waiting_interval_seconds,
            timeout=self.timeout_seconds,
        )


class RetryConfig(BaseModel):
    """Delivery retry configuration for the transport."""

    max_tries: int = Field(default=3, ge=1, le=10)
    max_time_seconds: float = Field(default=30.0, ge=1.0, le=300.0)


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class ClientConfig(BaseSettings):
    """Root configuration for aiomilvus."""

    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)
    polling: PollingConfig = Field(default_factory=PollingConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "AIOMILVUS_",
        "env_nested_delimiter": "__",
    }
