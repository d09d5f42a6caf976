"""Pydantic wire DTOs and query parameters for the bridge API."""

from usertasks.schemas.admin import AssignmentRequest, UserListDTO, UserTaskDefListDTO
from usertasks.schemas.common import (
    AuditEventDTO,
    CommentRequest,
    DetailedUserTaskRunDTO,
    RawAuditEvent,
    SimpleUserTaskRunDTO,
    UserDTO,
    UserGroupDTO,
    UserGroupListDTO,
    UserTaskAssignedEvent,
    UserTaskCancelledEvent,
    UserTaskCommentDeletedEvent,
    UserTaskCommentEvent,
    UserTaskExecutedEvent,
    UserTaskFieldDTO,
    UserTaskRef,
    UserTaskRunListDTO,
    UserTaskVariableValue,
)
from usertasks.schemas.group_management import (
    CreateGroupRequest,
    IDPGroupDTO,
    IDPGroupListDTO,
    UpdateGroupRequest,
)
from usertasks.schemas.params import (
    ListAllTasksParams,
    ListClaimableTasksParams,
    ListUserTaskDefsParams,
    ListUserTasksParams,
    SearchGroupsParams,
    SearchUsersParams,
)
from usertasks.schemas.public import IdentityProviderDTO, IdentityProviderListDTO
from usertasks.schemas.user_management import (
    CreateManagedUserRequest,
    IDPUserDTO,
    IDPUserListDTO,
    UpdateManagedUserRequest,
    UpsertPasswordRequest,
)

__all__ = [
    "AssignmentRequest",
    "UserListDTO",
    "UserTaskDefListDTO",
    "AuditEventDTO",
    "CommentRequest",
    "DetailedUserTaskRunDTO",
    "SimpleUserTaskRunDTO",
    "UserDTO",
    "UserGroupDTO",
    "UserGroupListDTO",
    "UserTaskAssignedEvent",
    "UserTaskCancelledEvent",
    "RawAuditEvent",
    "UserTaskCommentDeletedEvent",
    "UserTaskCommentEvent",
    "UserTaskExecutedEvent",
    "UserTaskFieldDTO",
    "UserTaskRef",
    "UserTaskRunListDTO",
    "UserTaskVariableValue",
    "CreateGroupRequest",
    "IDPGroupDTO",
    "IDPGroupListDTO",
    "UpdateGroupRequest",
    "ListAllTasksParams",
    "ListClaimableTasksParams",
    "ListUserTaskDefsParams",
    "ListUserTasksParams",
    "SearchGroupsParams",
    "SearchUsersParams",
    "IdentityProviderDTO",
    "IdentityProviderListDTO",
    "CreateManagedUserRequest",
    "IDPUserDTO",
    "IDPUserListDTO",
    "UpdateManagedUserRequest",
    "UpsertPasswordRequest",
]
