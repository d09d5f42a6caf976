"""DTOs specific to the admin endpoints."""

from pydantic import Field, model_validator

from usertasks.schemas.base import WireModel
from usertasks.schemas.common import UserDTO


class UserListDTO(WireModel):
    users: list[UserDTO] = Field(default_factory=list)


class UserTaskDefListDTO(WireModel):
    """One page of UserTaskDef names; bookmark is None on the last page."""

    user_task_def_names: list[str] = Field(default_factory=list)
    bookmark: str | None = None


class AssignmentRequest(WireModel):
    """Target of an admin assignment: a user, a group, or both."""

    user_id: str | None = None
    user_group: str | None = None

    @model_validator(mode="after")
    def require_target(self) -> "AssignmentRequest":
        if not self.user_id and not self.user_group:
            raise ValueError("AssignmentRequest needs user_id and/or user_group")
        return self
