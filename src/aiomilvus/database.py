"""Database-scoped operations."""

from typing import TYPE_CHECKING

from loguru import logger

from aiomilvus.apischema import AlterAliasRequest, CreateAliasRequest, DropAliasRequest

if TYPE_CHECKING:
    from aiomilvus.client import MilvusClient


class MilvusDatabase:
    """Handle for a database; None name means the service default."""

    def __init__(self, client: "MilvusClient", name: str | None = None) -> None:
        self._client = client
        self.name = name

    async def create_alias(self, collection_name: str, alias: str) -> None:
        """Create an alias for a collection."""
        await self._client.invoke(
            CreateAliasRequest(collection_name=collection_name, alias=alias, db_name=self.name)
        )
        logger.info("Created alias {} for collection {}", alias, collection_name)

    async def drop_alias(self, alias: str) -> None:
        """Drop an alias."""
        await self._client.invoke(DropAliasRequest(alias=alias, db_name=self.name))
        logger.info("Dropped alias {}", alias)

    async def alter_alias(self, collection_name: str, alias: str) -> None:
        """Point an alias at another collection."""
        await self._client.invoke(
            AlterAliasRequest(collection_name=collection_name, alias=alias, db_name=self.name)
        )
        logger.info("Altered alias {} to collection {}", alias, collection_name)
