"""Entry point for talking to a Milvus service."""

import asyncio
import math
from dataclasses import replace
from types import TracebackType
from typing import Any

from loguru import logger

from aiomilvus.apischema import (
    CheckHealthRequest,
    GetCompactionStateRequest,
    ManualCompactionRequest,
    MilvusRequest,
)
from aiomilvus.collection import MilvusCollection
from aiomilvus.config.models import ClientConfig
from aiomilvus.database import MilvusDatabase
from aiomilvus.models import CompactionState, HealthState
from aiomilvus.ports.transport import TransportPort
from aiomilvus.transport.rest import RestTransport
from aiomilvus.utils.polling import PollConfig, ProgressSink, poll


class MilvusClient:
    """
    Async client for a Milvus service.

    Hands out MilvusCollection and MilvusDatabase handles that share
    this client's transport and polling defaults.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: TransportPort | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._transport: TransportPort = transport or RestTransport(
            self.config.connection, self.config.retry
        )

    @property
    def address(self) -> str:
        return self._transport.address

    async def __aenter__(self) -> "MilvusClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._transport.close()

    async def invoke(self, request: MilvusRequest) -> dict[str, Any]:
        """Validate a request and send it through the transport."""
        request.verify()
        return await self._transport.invoke(request)

    def poll_config(
        self,
        waiting_interval: float | None = None,
        timeout: float | None = None,
        progress: ProgressSink | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> PollConfig:
        """
        Build a PollConfig from config.polling, overriding the values given.

        ``None`` keeps the configured interval or timeout. Pass ``math.inf``
        as ``timeout`` to wait without limit when a default timeout is set.
        """
        overrides: dict[str, Any] = {"progress": progress, "cancel_event": cancel_event}
        if waiting_interval is not None:
            overrides["waiting_interval"] = waiting_interval
        if timeout is not None:
            overrides["timeout"] = None if math.isinf(timeout) else timeout
        return replace(self.config.polling.to_poll_config(), **overrides)

    def collection(self, name: str, database: str | None = None) -> MilvusCollection:
        """Return a handle for a collection; no remote call is made."""
        return MilvusCollection(self, name, database or self.config.connection.database)

    def database(self, name: str | None = None) -> MilvusDatabase:
        """Return a handle for a database; None means the configured default."""
        return MilvusDatabase(self, name or self.config.connection.database)

    async def health(self) -> HealthState:
        """Check whether the service is healthy."""
        logger.debug("Checking health of {}", self.address)

        data = await self.invoke(CheckHealthRequest())
        status = data.get("status") or {}
        state = HealthState(
            is_healthy=data.get("isHealthy", data.get("is_healthy", False)),
            reasons=data.get("reasons") or [],
            error_code=str(status.get("error_code", "Success")),
            reason=status.get("reason", ""),
        )

        if not state.is_healthy:
            for reason in state.reasons:
                logger.warning("Milvus unhealthy: {}", reason)

        return state

    async def manual_compaction(self, collection_id: int) -> int:
        """
        Start a manual compaction.

        Args:
            collection_id: ID of the collection, from MilvusCollection.describe().

        Returns:
            ID of the started compaction.
        """
        data = await self.invoke(ManualCompactionRequest(collection_id=collection_id))
        compaction_id = int(data.get("compactionID", data.get("compaction_id", 0)))
        logger.info("Started compaction {} for collection {}", compaction_id, collection_id)
        return compaction_id

    async def get_compaction_state(self, compaction_id: int) -> CompactionState:
        """Return the current state of a compaction."""
        data = await self.invoke(GetCompactionStateRequest(compaction_id=compaction_id))
        return CompactionState(int(data.get("state", CompactionState.UNDEFINED)))

    async def wait_for_compaction(
        self,
        compaction_id: int,
        waiting_interval: float | None = None,
        timeout: float | None = None,
        progress: ProgressSink | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> CompactionState:
        """
        Poll until a compaction completes.

        To perform a single check, use get_compaction_state().

        Args:
            compaction_id: ID returned by manual_compaction().
            waiting_interval: Seconds between checks; None uses config.polling.
            timeout: Seconds before giving up; None uses config.polling and
                ``math.inf`` waits without limit.
            progress: Called with each CompactionState.
            cancel_event: Set it to stop waiting.

        Raises:
            PollTimeoutError: If the compaction did not complete within ``timeout``.
            PollCancelledError: If ``cancel_event`` was set.
        """

        async def probe() -> tuple[bool, CompactionState]:
            state = await self.get_compaction_state(compaction_id)
            return state == CompactionState.COMPLETED, state

        logger.debug("Waiting for compaction {}", compaction_id)
        state = await poll(
            probe,
            f"Timeout when waiting for compaction {compaction_id} to complete",
            self.poll_config(waiting_interval, timeout, progress, cancel_event),
        )
        logger.debug("Compaction {} completed", compaction_id)
        return state

    def __repr__(self) -> str:
        return f"MilvusClient({self.address})"
