"""Port interfaces for aiomilvus.

The client depends only on these abstractions; transports are
adapters that implement them.
"""

from aiomilvus.ports.transport import TransportPort

__all__ = ["TransportPort"]
