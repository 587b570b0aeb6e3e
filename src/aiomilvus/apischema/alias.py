"""Alias requests."""

from aiomilvus.apischema.base import MilvusRequest


class CreateAliasRequest(MilvusRequest):
    """Create an alias for a collection."""

    http_method = "POST"
    path = "/alias"
    required_fields = ("collection_name", "alias")

    collection_name: str
    alias: str


class DropAliasRequest(MilvusRequest):
    """Drop an alias."""

    http_method = "DELETE"
    path = "/alias"
    required_fields = ("alias",)

    alias: str


class AlterAliasRequest(MilvusRequest):
    """Point an existing alias at another collection."""

    http_method = "PATCH"
    path = "/alias"
    required_fields = ("collection_name", "alias")

    collection_name: str
    alias: str
