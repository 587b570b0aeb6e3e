"""Transport adapters for aiomilvus."""

from aiomilvus.transport.rest import RestTransport

__all__ = ["RestTransport"]
