"""aiomilvus utility modules."""

from aiomilvus.utils.polling import PollConfig, poll
from aiomilvus.utils.retry import retry_transport

__all__ = [
    "PollConfig",
    "poll",
    "retry_transport",
]
