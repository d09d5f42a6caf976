"""Admin endpoints: act on any task of the tenant and browse users, groups and definitions."""

from __future__ import annotations

from collections.abc import AsyncIterator

from usertasks.client.base import TaskOperationsController, paginate
from usertasks.infrastructure.http.query import path_segment, with_query
from usertasks.schemas.admin import AssignmentRequest, UserListDTO, UserTaskDefListDTO
from usertasks.schemas.common import (
    SimpleUserTaskRunDTO,
    UserDTO,
    UserGroupListDTO,
    UserTaskRef,
    UserTaskRunListDTO,
)
from usertasks.schemas.params import (
    ListAllTasksParams,
    ListUserTaskDefsParams,
    SearchUsersParams,
)


class AdminController(TaskOperationsController):
    """Unscoped task operations; get_user_task also returns the audit history."""

    _prefix = "/admin/tasks"

    async def list_all_tasks(self, params: ListAllTasksParams) -> UserTaskRunListDTO:
        data = await self._transport.request(with_query("/admin/tasks", params))
        return UserTaskRunListDTO.model_validate(data)

    async def iter_all_tasks(
        self, params: ListAllTasksParams
    ) -> AsyncIterator[SimpleUserTaskRunDTO]:
        async def fetch(bookmark: str | None) -> UserTaskRunListDTO:
            return await self.list_all_tasks(params.model_copy(update={"bookmark": bookmark}))

        async for page in paginate(fetch, params.bookmark):
            for task in page.user_tasks:
                yield task

    async def list_user_task_defs(
        self, params: ListUserTaskDefsParams
    ) -> UserTaskDefListDTO:
        data = await self._transport.request(with_query("/admin/taskTypes", params))
        return UserTaskDefListDTO.model_validate(data)

    async def iter_user_task_defs(self, limit: int = 25) -> AsyncIterator[str]:
        """Every UserTaskDef name of the tenant."""

        async def fetch(bookmark: str | None) -> UserTaskDefListDTO:
            return await self.list_user_task_defs(
                ListUserTaskDefsParams(limit=limit, bookmark=bookmark)
            )

        async for page in paginate(fetch):
            for name in page.user_task_def_names:
                yield name

    async def assign_user_task(
        self, ref: UserTaskRef, assignment: AssignmentRequest
    ) -> None:
        """Assign the task to a user and/or a group."""
        await self._transport.request(
            self._task_path(ref, "assign"), method="POST", json=assignment.to_wire()
        )

    async def list_groups(self) -> UserGroupListDTO:
        data = await self._transport.request("/admin/groups")
        return UserGroupListDTO.model_validate(data)

    async def list_users(self, params: SearchUsersParams | None = None) -> UserListDTO:
        data = await self._transport.request(with_query("/admin/users", params))
        return UserListDTO.model_validate(data)

    async def get_user(self, user_id: str) -> UserDTO:
        data = await self._transport.request(f"/admin/users/{path_segment(user_id)}")
        return UserDTO.model_validate(data)
