"""REST transport for the Milvus v1 HTTP API.

Sends every request as JSON, including on GET and DELETE, because the
Milvus proxy reads request bodies on all verbs.
"""

from typing import Any

import httpx
from loguru import logger

from aiomilvus.apischema.base import MilvusRequest, RestCall
from aiomilvus.config.models import ConnectionConfig, RetryConfig
from aiomilvus.errors import MilvusError, TransportError
from aiomilvus.utils.retry import retry_transport

API_PREFIX = "/api/v1"

_SUCCESS_CODES = (None, 0, "0", "Success")


class RestTransport:
    """httpx implementation of TransportPort."""

    def __init__(
        self,
        config: ConnectionConfig,
        retry: RetryConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize RestTransport.

        Args:
            config: Endpoint, port and request timeout.
            retry: Delivery retry limits; defaults to RetryConfig().
            client: Pre-built client; the transport will not close it.
        """
        retry = retry or RetryConfig()
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=config.base_url + API_PREFIX,
            timeout=config.timeout_seconds,
        )
        self._send = retry_transport(retry.max_tries, retry.max_time_seconds)(self._send_once)

    @property
    def address(self) -> str:
        return self._config.base_url

    async def invoke(self, request: MilvusRequest) -> dict[str, Any]:
        """Send a request and return its decoded, status-checked body."""
        call = request.build_rest()
        logger.debug("milvus {}: {} {}", request.operation, call.method, call.path)

        response = await self._send(call)
        data = _decode(response, call)
        _check_status(data, request.operation)
        return data

    async def close(self) -> None:
        """Close the client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _send_once(self, call: RestCall) -> httpx.Response:
        try:
            return await self._client.request(call.method, call.path, json=call.payload)
        except (httpx.ConnectError, httpx.ConnectTimeout) as e:
            raise TransportError(
                f"Could not connect to {self.address}: {e}", retryable=True
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{call.method} {call.path} failed: {e}") from e

    def __repr__(self) -> str:
        return f"RestTransport({self.address})"


def _decode(response: httpx.Response, call: RestCall) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        if response.is_error:
            raise TransportError(
                f"{call.method} {call.path} returned HTTP {response.status_code}"
            ) from e
        raise TransportError(f"{call.method} {call.path} returned invalid JSON") from e

    if not isinstance(data, dict):
        raise TransportError(
            f"{call.method} {call.path} returned {type(data).__name__}, expected an object"
        )

    if response.is_error and not _has_status(data):
        raise TransportError(f"{call.method} {call.path} returned HTTP {response.status_code}")

    return data


def _has_status(data: dict[str, Any]) -> bool:
    return "status" in data or "error_code" in data or "code" in data


def _check_status(data: dict[str, Any], operation: str) -> None:
    """Raise MilvusError when the body reports a non-success status."""
    status = data.get("status")
    if not isinstance(status, dict):
        status = data

    code = status.get("error_code", status.get("code"))
    if code in _SUCCESS_CODES:
        return

    reason = str(status.get("reason") or status.get("message") or "")
    logger.error("milvus {} failed: {}, {}", operation, code, reason)
    raise MilvusError(str(code), reason)
