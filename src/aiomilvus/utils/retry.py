"""Retry utilities with exponential backoff.

Only delivery failures are retried: a request that never reached the
service is safe to send again. Status errors from Milvus and anything
raised while polling are never retried here.
"""

from collections.abc import Callable, Mapping
from typing import Any

import backoff
from loguru import logger

from aiomilvus.errors import TransportError


def on_backoff(details: Mapping[str, Any]) -> None:
    """Log retry attempts."""
    logger.warning(
        "Retrying {}: attempt={} wait={}s error={}",
        details["target"].__name__,
        details["tries"],
        details["wait"],
        details["exception"],
    )


def on_giveup(details: Mapping[str, Any]) -> None:
    """Log when retries are exhausted."""
    logger.error(
        "Gave up on {}: attempts={} error={}",
        details["target"].__name__,
        details["tries"],
        details["exception"],
    )


def _is_permanent(error: Exception) -> bool:
    return isinstance(error, TransportError) and not error.retryable


def retry_transport(max_tries: int = 3, max_time: float = 30.0) -> Callable[..., Any]:
    """
    Build a decorator that retries retryable TransportErrors.

    Args:
        max_tries: Total attempts, including the first one.
        max_time: Total seconds across all attempts.
    """
    return backoff.on_exception(
        backoff.expo,
        TransportError,
        max_tries=max_tries,
        max_time=max_time,
        giveup=_is_permanent,
        on_backoff=on_backoff,
        on_giveup=on_giveup,
    )
