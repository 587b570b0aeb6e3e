"""Status models for health checks and long-running operations."""

from pydantic import AliasChoices, BaseModel, Field


class HealthState(BaseModel):
    """Result of a Milvus health check."""

    is_healthy: bool = Field(
        default=False, validation_alias=AliasChoices("isHealthy", "is_healthy")
    )
    reasons: list[str] = Field(default_factory=list)
    error_code: str = "Success"
    reason: str = ""

    model_config = {"populate_by_name": True}


class IndexBuildProgress(BaseModel):
    """Row counts reported while an index is being built."""

    indexed_rows: int = Field(
        default=0, validation_alias=AliasChoices("indexed_rows", "indexedRows")
    )
    total_rows: int = Field(default=0, validation_alias=AliasChoices("total_rows", "totalRows"))

    model_config = {"populate_by_name": True}

    @property
    def is_complete(self) -> bool:
        """True once every row is indexed."""
        return self.indexed_rows >= self.total_rows

    @property
    def progress(self) -> int:
        """Indexed share of rows as a percentage in [0, 100]."""
        if self.total_rows <= 0:
            return 100
        return min(100, self.indexed_rows * 100 // self.total_rows)
