"""aiomilvus error types.

All custom exceptions inherit from MilvusClientError to allow
catching any client-specific error.
"""

from typing import Any


class MilvusClientError(Exception):
    """Base exception for all aiomilvus errors."""

    pass


class ConfigurationError(MilvusClientError, ValueError):
    """Invalid configuration."""

    pass


class RequestValidationError(MilvusClientError, ValueError):
    """A request is missing a required field or carries an invalid value."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MilvusError(MilvusClientError):
    """The Milvus service answered with a non-success status."""

    def __init__(self, error_code: str, reason: str = "") -> None:
        super().__init__(f"{error_code}: {reason}" if reason else error_code)
        self.error_code = error_code
        self.reason = reason


class TransportError(MilvusClientError):
    """The request could not be delivered or its response could not be read."""

    def __init__(self, message: str, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


class PollTimeoutError(MilvusClientError, TimeoutError):
    """Polling gave up before the awaited condition held."""

    def __init__(
        self,
        message: str,
        timeout: float,
        elapsed: float,
        last_progress: Any = None,
    ) -> None:
        super().__init__(message)
        self.timeout = timeout
        self.elapsed = elapsed
        self.last_progress = last_progress


class PollCancelledError(MilvusClientError):
    """Polling stopped because its cancellation signal was set."""

    pass
