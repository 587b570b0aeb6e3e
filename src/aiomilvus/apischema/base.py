"""Base request model shared by every Milvus request."""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

from pydantic import BaseModel

from aiomilvus.errors import RequestValidationError

HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]


@dataclass(frozen=True)
class RestCall:
    """A request rendered for the REST API: verb, path and JSON body."""

    method: HttpMethod
    path: str
    payload: dict[str, Any] = field(default_factory=dict)


class MilvusRequest(BaseModel):
    """
    A request to the Milvus service.

    Subclasses declare the REST verb and path, and the names of the
    string fields that must not be blank.
    """

    http_method: ClassVar[HttpMethod] = "GET"
    path: ClassVar[str] = ""
    required_fields: ClassVar[tuple[str, ...]] = ()

    db_name: str | None = None

    def verify(self) -> None:
        """Raise RequestValidationError if a required field is blank."""
        for name in self.required_fields:
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise RequestValidationError(f"{name} must not be blank", field=name)
        if self.db_name is not None and not self.db_name.strip():
            raise RequestValidationError("db_name must not be blank", field="db_name")

    def build_rest(self) -> RestCall:
        """Validate and render the request for the REST API."""
        self.verify()
        return RestCall(
            method=self.http_method,
            path=self.path,
            payload=self.model_dump(exclude_none=True, by_alias=True),
        )

    @property
    def operation(self) -> str:
        """Name used in log lines."""
        return type(self).__name__.removesuffix("Request")
