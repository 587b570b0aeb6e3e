"""Tests for request models."""

import pytest

from aiomilvus.apischema import (
    AlterAliasRequest,
    CheckHealthRequest,
    CreateAliasRequest,
    DescribeCollectionRequest,
    DropAliasRequest,
    DropCollectionRequest,
    DropIndexRequest,
    GetCollectionStatisticsRequest,
    GetCompactionStateRequest,
    GetIndexBuildProgressRequest,
    GetLoadingProgressRequest,
    LoadCollectionRequest,
    ManualCompactionRequest,
    MilvusRequest,
    ReleaseCollectionRequest,
    RestCall,
)
from aiomilvus.errors import RequestValidationError


class TestRestRendering:
    """Test verb, path and payload of each request."""

    @pytest.mark.parametrize(
        ("request_obj", "method", "path"),
        [
            (CheckHealthRequest(), "GET", "/health"),
            (DescribeCollectionRequest(collection_name="books"), "GET", "/collection"),
            (DropCollectionRequest(collection_name="books"), "DELETE", "/collection"),
            (
                GetCollectionStatisticsRequest(collection_name="books"),
                "GET",
                "/collection/statistics",
            ),
            (LoadCollectionRequest(collection_name="books"), "POST", "/collection/load"),
            (ReleaseCollectionRequest(collection_name="books"), "DELETE", "/collection/load"),
            (
                GetLoadingProgressRequest(collection_name="books"),
                "GET",
                "/collection/loading_progress",
            ),
            (
                GetIndexBuildProgressRequest(collection_name="books", field_name="intro"),
                "GET",
                "/index/progress",
            ),
            (
                DropIndexRequest(collection_name="books", field_name="intro", index_name="idx"),
                "DELETE",
                "/index",
            ),
            (CreateAliasRequest(collection_name="books", alias="b"), "POST", "/alias"),
            (DropAliasRequest(alias="b"), "DELETE", "/alias"),
            (AlterAliasRequest(collection_name="books", alias="b"), "PATCH", "/alias"),
            (ManualCompactionRequest(collection_id=7), "POST", "/compaction"),
            (GetCompactionStateRequest(compaction_id=9), "GET", "/compaction/state"),
        ],
    )
    def test_verb_and_path(self, request_obj: MilvusRequest, method: str, path: str) -> None:
        """Each request should map to its REST verb and path."""
        call = request_obj.build_rest()
        assert isinstance(call, RestCall)
        assert call.method == method
        assert call.path == path

    def test_db_name_omitted_when_unset(self) -> None:
        """An unset database should not appear in the payload."""
        call = DescribeCollectionRequest(collection_name="books").build_rest()
        assert call.payload == {"collection_name": "books"}

    def test_db_name_included_when_set(self) -> None:
        """A set database should appear as db_name."""
        call = DropIndexRequest(
            collection_name="books", field_name="intro", index_name="idx", db_name="library"
        ).build_rest()
        assert call.payload == {
            "db_name": "library",
            "collection_name": "books",
            "field_name": "intro",
            "index_name": "idx",
        }

    def test_loading_progress_payload(self) -> None:
        """Partition names should be sent as a list."""
        call = GetLoadingProgressRequest(
            collection_name="books", partition_names=["p1", "p2"]
        ).build_rest()
        assert call.payload["partition_names"] == ["p1", "p2"]

    def test_load_without_replica_omits_it(self) -> None:
        """replica_number should be sent only when given."""
        assert "replica_number" not in LoadCollectionRequest(collection_name="b").build_rest().payload
        call = LoadCollectionRequest(collection_name="b", replica_number=2).build_rest()
        assert call.payload["replica_number"] == 2

    def test_compaction_ids_use_wire_names(self) -> None:
        """Compaction requests should use the service's field names."""
        assert ManualCompactionRequest(collection_id=7).build_rest().payload == {
            "collectionID": 7
        }
        assert GetCompactionStateRequest(compaction_id=9).build_rest().payload == {
            "compactionID": 9
        }

    def test_operation_name(self) -> None:
        """operation should be the class name without the Request suffix."""
        assert DropAliasRequest(alias="b").operation == "DropAlias"


class TestValidation:
    """Test required field checks."""

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_blank_collection_name(self, name: str) -> None:
        """Blank collection names should be rejected."""
        with pytest.raises(RequestValidationError) as exc_info:
            DescribeCollectionRequest(collection_name=name).build_rest()
        assert exc_info.value.field == "collection_name"

    def test_drop_index_requires_every_name(self) -> None:
        """Drop index needs collection, field and index names."""
        with pytest.raises(RequestValidationError) as exc_info:
            DropIndexRequest(collection_name="books", field_name="intro", index_name=" ").verify()
        assert exc_info.value.field == "index_name"

    def test_index_progress_requires_field(self) -> None:
        """Index build progress needs a field name."""
        with pytest.raises(RequestValidationError) as exc_info:
            GetIndexBuildProgressRequest(collection_name="books", field_name="").verify()
        assert exc_info.value.field == "field_name"

    def test_blank_alias(self) -> None:
        """Alias requests need a non-blank alias."""
        with pytest.raises(RequestValidationError):
            CreateAliasRequest(collection_name="books", alias="").verify()
        with pytest.raises(RequestValidationError):
            DropAliasRequest(alias=" ").verify()
        with pytest.raises(RequestValidationError):
            AlterAliasRequest(collection_name="", alias="b").verify()

    def test_blank_db_name(self) -> None:
        """A database name, when given, must not be blank."""
        with pytest.raises(RequestValidationError) as exc_info:
            DropAliasRequest(alias="b", db_name=" ").verify()
        assert exc_info.value.field == "db_name"

    def test_replica_number_at_least_one(self) -> None:
        """replica_number below 1 should be rejected."""
        with pytest.raises(RequestValidationError) as exc_info:
            LoadCollectionRequest(collection_name="books", replica_number=0).verify()
        assert exc_info.value.field == "replica_number"

    def test_blank_partition_name(self) -> None:
        """Blank partition names should be rejected."""
        with pytest.raises(RequestValidationError):
            GetLoadingProgressRequest(collection_name="books", partition_names=["p1", ""]).verify()

    def test_compaction_ids_positive(self) -> None:
        """Compaction requests need positive IDs."""
        with pytest.raises(RequestValidationError):
            ManualCompactionRequest(collection_id=0).verify()
        with pytest.raises(RequestValidationError):
            GetCompactionStateRequest(compaction_id=-1).verify()
