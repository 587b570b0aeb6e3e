"""Poll-until-condition helper for long-running remote operations.

Milvus exposes loading, index building and compaction only as
point-in-time status queries. ``poll`` samples such a query until it
reports completion, the timeout elapses, or the caller cancels.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from aiomilvus.errors import PollCancelledError, PollTimeoutError

T = TypeVar("T")

Probe = Callable[[], Awaitable[tuple[bool, T]]]
ProgressSink = Callable[[Any], Any]

DEFAULT_WAITING_INTERVAL = 0.5


@dataclass(frozen=True)
class PollConfig:
    """Parameters for a single poll session.

    Attributes:
        waiting_interval: Seconds to wait between probe invocations.
        timeout: Upper bound on seconds spent polling, or None for unbounded.
        progress: Called with every progress value, including the final one.
        cancel_event: Set it to stop polling at the next cycle boundary.
    """

    waiting_interval: float = DEFAULT_WAITING_INTERVAL
    timeout: float | None = None
    progress: ProgressSink | None = None
    cancel_event: asyncio.Event | None = None

    def __post_init__(self) -> None:
        if self.waiting_interval < 0:
            raise ValueError("waiting_interval must not be negative")
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must not be negative")


async def poll(
    probe: Probe[T],
    timeout_message: str,
    config: PollConfig | None = None,
) -> T:
    """
    Invoke ``probe`` until it reports completion.

    The timeout is checked only after a probe returns, so a zero timeout
    still allows exactly one probe. Exceptions raised by the probe
    propagate unchanged.

    Args:
        probe: Async callable returning ``(is_complete, progress_value)``.
        timeout_message: Message for the PollTimeoutError.
        config: Interval, timeout, progress sink and cancellation signal.

    Returns:
        The progress value of the probe call that reported completion.

    Raises:
        PollTimeoutError: If ``config.timeout`` elapsed without completion.
        PollCancelledError: If ``config.cancel_event`` was set.
    """
    config = config or PollConfig()
    loop = asyncio.get_running_loop()
    started = loop.time()

    while True:
        _raise_if_cancelled(config.cancel_event)

        is_complete, progress = await probe()

        if config.progress is not None:
            reported = config.progress(progress)
            if inspect.isawaitable(reported):
                await reported

        if is_complete:
            return progress

        elapsed = loop.time() - started
        if config.timeout is not None and elapsed >= config.timeout:
            raise PollTimeoutError(
                timeout_message,
                timeout=config.timeout,
                elapsed=elapsed,
                last_progress=progress,
            )

        await _wait(config.waiting_interval, config.cancel_event)


def _raise_if_cancelled(cancel_event: asyncio.Event | None) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise PollCancelledError("Polling was cancelled")


async def _wait(interval: float, cancel_event: asyncio.Event | None) -> None:
    """Sleep for ``interval`` seconds, returning early on cancellation."""
    if cancel_event is None:
        await asyncio.sleep(interval)
        return

    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=interval)
    except TimeoutError:
        return

    raise PollCancelledError("Polling was cancelled")
