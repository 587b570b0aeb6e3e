"""Health and compaction requests."""

from pydantic import Field

from aiomilvus.apischema.base import MilvusRequest
from aiomilvus.errors import RequestValidationError


class CheckHealthRequest(MilvusRequest):
    """Ask the service whether it is healthy."""

    http_method = "GET"
    path = "/health"


class ManualCompactionRequest(MilvusRequest):
    """Start a manual compaction of a collection."""

    http_method = "POST"
    path = "/compaction"

    collection_id: int = Field(serialization_alias="collectionID")

    def verify(self) -> None:
        super().verify()
        if self.collection_id <= 0:
            raise RequestValidationError("collection_id must be positive", field="collection_id")


class GetCompactionStateRequest(MilvusRequest):
    """Query the state of a manual compaction."""

    http_method = "GET"
    path = "/compaction/state"

    compaction_id: int = Field(serialization_alias="compactionID")

    def verify(self) -> None:
        super().verify()
        if self.compaction_id <= 0:
            raise RequestValidationError("compaction_id must be positive", field="compaction_id")
