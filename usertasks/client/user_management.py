"""Identity-provider user management (admin only)."""

from __future__ import annotations

from usertasks.client.base import BaseController
from usertasks.infrastructure.http.query import path_segment, with_query
from usertasks.schemas.params import SearchUsersParams
from usertasks.schemas.user_management import (
    CreateManagedUserRequest,
    IDPUserDTO,
    IDPUserListDTO,
    UpdateManagedUserRequest,
    UpsertPasswordRequest,
)


class UserManagementController(BaseController):
    """CRUD on the tenant IdP's users, their group membership and admin role."""

    def _user_path(self, user_id: str, suffix: str = "") -> str:
        return f"/management/users/{path_segment(user_id)}{suffix}"

    async def list_users(self, params: SearchUsersParams | None = None) -> IDPUserListDTO:
        data = await self._transport.request(with_query("/management/users", params))
        return IDPUserListDTO.model_validate(data)

    async def create_user(self, request: CreateManagedUserRequest) -> None:
        await self._transport.request(
            "/management/users", method="POST", json=request.to_wire()
        )

    async def get_user(self, user_id: str) -> IDPUserDTO:
        data = await self._transport.request(self._user_path(user_id))
        return IDPUserDTO.model_validate(data)

    async def update_user(self, user_id: str, request: UpdateManagedUserRequest) -> None:
        await self._transport.request(
            self._user_path(user_id), method="PUT", json=request.to_wire()
        )

    async def delete_user(self, user_id: str, ignore_orphan_tasks: bool = False) -> None:
        """Delete a user.

        The server refuses while tasks are still assigned to the user unless
        ignore_orphan_tasks is set; those tasks then reference an invalid user.
        """
        path = with_query(
            self._user_path(user_id),
            {"ignoreOrphanTasks": True if ignore_orphan_tasks else None},
        )
        await self._transport.request(path, method="DELETE")

    async def upsert_password(self, user_id: str, request: UpsertPasswordRequest) -> None:
        """Set or reset a user's password (temporary forces a change at next login)."""
        await self._transport.request(
            self._user_path(user_id, "/password"), method="PUT", json=request.to_wire()
        )

    async def grant_admin_role(self, user_id: str) -> None:
        await self._transport.request(self._user_path(user_id, "/roles/admin"), method="POST")

    async def revoke_admin_role(self, user_id: str) -> None:
        await self._transport.request(self._user_path(user_id, "/roles/admin"), method="DELETE")

    async def join_group(self, user_id: str, group_id: str) -> None:
        await self._transport.request(
            self._user_path(user_id, f"/groups/{path_segment(group_id)}"), method="POST"
        )

    async def leave_group(self, user_id: str, group_id: str) -> None:
        await self._transport.request(
            self._user_path(user_id, f"/groups/{path_segment(group_id)}"), method="DELETE"
        )
