"""Request models for the Milvus API.

Each request validates its required fields and renders itself as a
REST call. Transports decide how the call is delivered.
"""

from aiomilvus.apischema.alias import AlterAliasRequest, CreateAliasRequest, DropAliasRequest
from aiomilvus.apischema.base import MilvusRequest, RestCall
from aiomilvus.apischema.collection import (
    DescribeCollectionRequest,
    DropCollectionRequest,
    GetCollectionStatisticsRequest,
    GetLoadingProgressRequest,
    LoadCollectionRequest,
    ReleaseCollectionRequest,
)
from aiomilvus.apischema.index import DropIndexRequest, GetIndexBuildProgressRequest
from aiomilvus.apischema.maintenance import (
    CheckHealthRequest,
    GetCompactionStateRequest,
    ManualCompactionRequest,
)

__all__ = [
    "AlterAliasRequest",
    "CheckHealthRequest",
    "CreateAliasRequest",
    "DescribeCollectionRequest",
    "DropAliasRequest",
    "DropCollectionRequest",
    "DropIndexRequest",
    "GetCollectionStatisticsRequest",
    "GetCompactionStateRequest",
    "GetIndexBuildProgressRequest",
    "GetLoadingProgressRequest",
    "LoadCollectionRequest",
    "ManualCompactionRequest",
    "MilvusRequest",
    "ReleaseCollectionRequest",
    "RestCall",
]
