"""Collection description models built from Milvus responses."""

import base64
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

from aiomilvus.models.enums import ConsistencyLevel, DataType, FieldState

VARCHAR_MAX_LENGTH = "max_length"
VECTOR_DIM = "dim"


class FieldSchema(BaseModel):
    """
    A single field of a collection schema.

    ``max_length`` and ``dimension`` are lifted out of the field's
    type params when present.
    """

    field_id: int = Field(default=0, validation_alias=AliasChoices("fieldID", "field_id"))
    name: str
    data_type: DataType = DataType.NONE
    state: FieldState = FieldState.FIELD_CREATED
    is_primary_key: bool = False
    auto_id: bool = Field(default=False, validation_alias=AliasChoices("autoID", "auto_id"))
    is_partition_key: bool = False
    is_dynamic: bool = False
    description: str = ""
    max_length: int | None = None
    dimension: int | None = None

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def apply_type_params(cls, data: Any) -> Any:
        """Copy known type params onto typed attributes."""
        if not isinstance(data, dict):
            return data

        params = data.get("type_params") or []
        data = dict(data)
        for param in params:
            key = param.get("key")
            if key == VARCHAR_MAX_LENGTH:
                data.setdefault("max_length", int(param["value"]))
            elif key == VECTOR_DIM:
                data.setdefault("dimension", int(param["value"]))
        return data


class CollectionSchema(BaseModel):
    """Schema of a collection."""

    name: str = ""
    description: str = ""
    fields: list[FieldSchema] = Field(default_factory=list)


class CollectionDescription(BaseModel):
    """Configuration and schema of a collection, as reported by Milvus."""

    collection_name: str
    collection_id: int = Field(
        default=0, validation_alias=AliasChoices("collectionID", "collection_id")
    )
    aliases: list[str] = Field(default_factory=list)
    consistency_level: ConsistencyLevel = ConsistencyLevel.STRONG
    created_utc_timestamp: int = 0
    collection_schema: CollectionSchema = Field(
        default_factory=CollectionSchema,
        validation_alias=AliasChoices("schema", "collection_schema"),
    )
    shards_num: int = 0
    start_positions: dict[str, list[int]] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    @field_validator("aliases", mode="before")
    @classmethod
    def null_aliases(cls, v: Any) -> Any:
        """Milvus omits or nulls the alias list when there are none."""
        return v or []

    @field_validator("start_positions", mode="before")
    @classmethod
    def decode_start_positions(cls, v: Any) -> Any:
        """Convert ``[{key, data}]`` pairs with base64 data into a mapping."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return v

        positions: dict[str, list[int]] = {}
        for pair in v:
            data = pair.get("data") or ""
            raw = base64.b64decode(data) if isinstance(data, str) else bytes(data)
            positions[pair["key"]] = list(raw)
        return positions
