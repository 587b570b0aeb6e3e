"""Port interface for delivering requests to Milvus."""

from typing import Any, Protocol

from aiomilvus.apischema.base import MilvusRequest


class TransportPort(Protocol):
    """Protocol for sending a request and returning its decoded response.

    Implementations own the connection and translate delivery failures
    and non-success statuses into aiomilvus errors.
    """

    @property
    def address(self) -> str:
        """Human-readable address of the service."""
        ...

    async def invoke(self, request: MilvusRequest) -> dict[str, Any]:
        """Send a request and return the decoded response body.

        Args:
            request: Request to send; it is validated before delivery.

        Returns:
            Response body as a mapping.

        Raises:
            RequestValidationError: If the request is missing required fields
            MilvusError: If the service answered with a non-success status
            TransportError: If the request could not be delivered
        """
        ...

    async def close(self) -> None:
        """Release the underlying connection."""
        ...
