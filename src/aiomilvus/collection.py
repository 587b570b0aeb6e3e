"""Operations on a single Milvus collection."""

import asyncio
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from loguru import logger

from aiomilvus.apischema import (
    DescribeCollectionRequest,
    DropCollectionRequest,
    DropIndexRequest,
    GetCollectionStatisticsRequest,
    GetIndexBuildProgressRequest,
    GetLoadingProgressRequest,
    LoadCollectionRequest,
    ReleaseCollectionRequest,
)
from aiomilvus.models import CollectionDescription, IndexBuildProgress
from aiomilvus.utils.polling import ProgressSink, poll

if TYPE_CHECKING:
    from aiomilvus.client import MilvusClient

FULLY_LOADED = 100


class MilvusCollection:
    """Handle for a collection, optionally scoped to a database."""

    def __init__(self, client: "MilvusClient", name: str, database: str | None = None) -> None:
        self._client = client
        self.name = name
        self.database_name = database

    def _request_args(self) -> dict[str, Any]:
        return {"collection_name": self.name, "db_name": self.database_name}

    async def describe(self) -> CollectionDescription:
        """Describe the collection, returning its configuration and schema."""
        data = await self._client.invoke(DescribeCollectionRequest(**self._request_args()))
        data.setdefault("collection_name", self.name)
        return CollectionDescription.model_validate(data)

    async def drop(self) -> None:
        """Drop the collection."""
        await self._client.invoke(DropCollectionRequest(**self._request_args()))
        logger.info("Dropped collection {}", self.name)

    async def get_statistics(self) -> dict[str, str]:
        """Return collection statistics such as ``row_count``."""
        data = await self._client.invoke(GetCollectionStatisticsRequest(**self._request_args()))
        return {pair["key"]: pair["value"] for pair in data.get("stats") or []}

    async def load(self, replica_number: int | None = None) -> None:
        """Start loading the collection into memory so it can be searched."""
        await self._client.invoke(
            LoadCollectionRequest(**self._request_args(), replica_number=replica_number)
        )

    async def release(self) -> None:
        """Release the collection from memory."""
        await self._client.invoke(ReleaseCollectionRequest(**self._request_args()))

    async def get_loading_progress(self, partition_names: Sequence[str] | None = None) -> int:
        """
        Return the loading progress of the collection as a percentage.

        Args:
            partition_names: Restrict the check to these partitions.
        """
        data = await self._client.invoke(
            GetLoadingProgressRequest(
                **self._request_args(), partition_names=list(partition_names or [])
            )
        )
        return int(data.get("progress", 0))

    async def wait_for_collection_load(
        self,
        partition_names: Sequence[str] | None = None,
        waiting_interval: float | None = None,
        timeout: float | None = None,
        progress: ProgressSink | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> int:
        """
        Poll the loading progress until the collection is fully loaded.

        To perform a single check, use get_loading_progress().

        Args:
            partition_names: Wait only for these partitions.
            waiting_interval: Seconds between checks; None uses config.polling.
            timeout: Seconds before giving up; None uses config.polling and
                ``math.inf`` waits without limit.
            progress: Called with each loading percentage.
            cancel_event: Set it to stop waiting.

        Returns:
            The final loading percentage.

        Raises:
            PollTimeoutError: If loading did not finish within ``timeout``.
            PollCancelledError: If ``cancel_event`` was set.
        """
        names = list(partition_names or [])

        async def probe() -> tuple[bool, int]:
            loaded = await self.get_loading_progress(names)
            return loaded == FULLY_LOADED, loaded

        logger.debug("Waiting for collection {} to load", self.name)
        loaded = await poll(
            probe,
            f"Timeout when waiting for collection '{self.name}' to load",
            self._client.poll_config(waiting_interval, timeout, progress, cancel_event),
        )
        logger.debug("Collection {} loaded", self.name)
        return loaded

    async def get_index_build_progress(self, field_name: str) -> IndexBuildProgress:
        """Return how many rows of ``field_name`` have been indexed."""
        data = await self._client.invoke(
            GetIndexBuildProgressRequest(**self._request_args(), field_name=field_name)
        )
        return IndexBuildProgress.model_validate(data)

    async def wait_for_index_build(
        self,
        field_name: str,
        waiting_interval: float | None = None,
        timeout: float | None = None,
        progress: ProgressSink | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> IndexBuildProgress:
        """
        Poll the index build progress of a field until every row is indexed.

        ``waiting_interval`` and ``timeout`` follow wait_for_collection_load().

        Raises:
            PollTimeoutError: If the build did not finish within ``timeout``.
            PollCancelledError: If ``cancel_event`` was set.
        """

        async def probe() -> tuple[bool, IndexBuildProgress]:
            build = await self.get_index_build_progress(field_name)
            return build.is_complete, build

        logger.debug("Waiting for index on {}.{}", self.name, field_name)
        return await poll(
            probe,
            f"Timeout when waiting for index on '{self.name}.{field_name}' to build",
            self._client.poll_config(waiting_interval, timeout, progress, cancel_event),
        )

    async def drop_index(self, field_name: str, index_name: str) -> None:
        """Drop an index from a field."""
        await self._client.invoke(
            DropIndexRequest(
                **self._request_args(), field_name=field_name, index_name=index_name
            )
        )

    def __repr__(self) -> str:
        return f"MilvusCollection({self.name!r})"
