"""Collection requests."""

from pydantic import Field

from aiomilvus.apischema.base import MilvusRequest
from aiomilvus.errors import RequestValidationError


class CollectionRequest(MilvusRequest):
    """A request addressed to one collection."""

    required_fields = ("collection_name",)

    collection_name: str


class DescribeCollectionRequest(CollectionRequest):
    """Describe a collection's configuration and schema."""

    http_method = "GET"
    path = "/collection"


class DropCollectionRequest(CollectionRequest):
    """Drop a collection."""

    http_method = "DELETE"
    path = "/collection"


class GetCollectionStatisticsRequest(CollectionRequest):
    """Fetch row counts and other statistics of a collection."""

    http_method = "GET"
    path = "/collection/statistics"


class LoadCollectionRequest(CollectionRequest):
    """Load a collection into memory."""

    http_method = "POST"
    path = "/collection/load"

    replica_number: int | None = None

    def verify(self) -> None:
        super().verify()
        if self.replica_number is not None and self.replica_number < 1:
            raise RequestValidationError(
                "replica_number must be greater than or equal to 1",
                field="replica_number",
            )


class ReleaseCollectionRequest(CollectionRequest):
    """Release a loaded collection from memory."""

    http_method = "DELETE"
    path = "/collection/load"


class GetLoadingProgressRequest(CollectionRequest):
    """Query how far a collection, or some of its partitions, has loaded."""

    http_method = "GET"
    path = "/collection/loading_progress"

    partition_names: list[str] = Field(default_factory=list)

    def verify(self) -> None:
        super().verify()
        for name in self.partition_names:
            if not name.strip():
                raise RequestValidationError(
                    "partition_names must not contain blank names",
                    field="partition_names",
                )
