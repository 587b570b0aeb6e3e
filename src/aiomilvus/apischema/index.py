"""Index requests."""

from aiomilvus.apischema.base import MilvusRequest


class GetIndexBuildProgressRequest(MilvusRequest):
    """Query how many rows of a field have been indexed."""

    http_method = "GET"
    path = "/index/progress"
    required_fields = ("collection_name", "field_name")

    collection_name: str
    field_name: str


class DropIndexRequest(MilvusRequest):
    """Drop an index from a field."""

    http_method = "DELETE"
    path = "/index"
    required_fields = ("collection_name", "field_name", "index_name")

    collection_name: str
    field_name: str
    index_name: str
