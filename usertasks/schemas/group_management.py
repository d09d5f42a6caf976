"""Identity-provider group DTOs (management endpoints)."""

from pydantic import Field

from usertasks.schemas.base import WireModel


class IDPGroupDTO(WireModel):
    id: str
    name: str


class IDPGroupListDTO(WireModel):
    groups: list[IDPGroupDTO] = Field(default_factory=list)


class CreateGroupRequest(WireModel):
    name: str = Field(..., min_length=1)


class UpdateGroupRequest(WireModel):
    name: str = Field(..., min_length=1)
