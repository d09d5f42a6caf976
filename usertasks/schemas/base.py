"""Base models for bridge wire DTOs and query parameters."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """DTO exchanged as JSON with the bridge (camelCase on the wire).

    Populate by either the Python name or the wire alias. Unknown fields
    sent by newer servers are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize for a request body (aliases, no nulls)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class QueryParams(BaseModel):
    """Flat query parameters; field order is the query-string order."""

    model_config = ConfigDict(extra="forbid")
