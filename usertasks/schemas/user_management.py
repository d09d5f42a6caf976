"""Identity-provider user DTOs (management endpoints)."""

from typing import Any

from pydantic import Field, field_validator

from usertasks.schemas.base import WireModel
from usertasks.schemas.group_management import IDPGroupDTO


class IDPUserDTO(WireModel):
    """User record as held by the tenant's identity provider.

    The bridge sends null for groups and roles a user does not have;
    those arrive here as empty collections.
    """

    id: str
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    groups: list[IDPGroupDTO] = Field(default_factory=list)
    realm_roles: list[str] = Field(default_factory=list)
    client_roles: dict[str, list[str]] = Field(default_factory=dict)
    enabled: bool = True

    @field_validator("groups", "realm_roles", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("client_roles", mode="before")
    @classmethod
    def _null_dict(cls, value: Any) -> Any:
        return {} if value is None else value


class IDPUserListDTO(WireModel):
    users: list[IDPUserDTO] = Field(default_factory=list)


class CreateManagedUserRequest(WireModel):
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class UpdateManagedUserRequest(WireModel):
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    enabled: bool | None = None


class UpsertPasswordRequest(WireModel):
    password: str = Field(..., min_length=1)
    temporary: bool = False
