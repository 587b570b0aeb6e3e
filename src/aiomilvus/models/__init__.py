"""Domain models for aiomilvus."""

from aiomilvus.models.collection import CollectionDescription, CollectionSchema, FieldSchema
from aiomilvus.models.enums import CompactionState, ConsistencyLevel, DataType, FieldState
from aiomilvus.models.status import HealthState, IndexBuildProgress

__all__ = [
    "CollectionDescription",
    "CollectionSchema",
    "CompactionState",
    "ConsistencyLevel",
    "DataType",
    "FieldSchema",
    "FieldState",
    "HealthState",
    "IndexBuildProgress",
]
