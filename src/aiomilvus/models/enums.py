"""Enumerations mirroring the Milvus wire values."""

from enum import IntEnum


class DataType(IntEnum):
    """Field data type."""

    NONE = 0
    BOOL = 1
    INT8 = 2
    INT16 = 3
    INT32 = 4
    INT64 = 5
    FLOAT = 10
    DOUBLE = 11
    STRING = 20
    VARCHAR = 21
    ARRAY = 22
    JSON = 23
    BINARY_VECTOR = 100
    FLOAT_VECTOR = 101
    FLOAT16_VECTOR = 102
    BFLOAT16_VECTOR = 103
    SPARSE_FLOAT_VECTOR = 104


class FieldState(IntEnum):
    """Lifecycle state of a collection field."""

    FIELD_CREATED = 0
    FIELD_CREATING = 1
    FIELD_DROPPING = 2
    FIELD_DROPPED = 3


class ConsistencyLevel(IntEnum):
    """Read consistency level of a collection."""

    STRONG = 0
    SESSION = 1
    BOUNDED_STALENESS = 2
    EVENTUALLY = 3
    CUSTOMIZED = 4


class CompactionState(IntEnum):
    """State of a manual compaction."""

    UNDEFINED = 0
    EXECUTING = 1
    COMPLETED = 2
