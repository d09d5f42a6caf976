"""Endpoints scoped to the authenticated caller's own tasks and identity."""

from __future__ import annotations

from collections.abc import AsyncIterator

from usertasks.client.base import TaskOperationsController, paginate
from usertasks.infrastructure.http.query import path_segment, with_query
from usertasks.schemas.common import (
    AuditEventDTO,
    CommentRequest,
    SimpleUserTaskRunDTO,
    UserDTO,
    UserGroupListDTO,
    UserTaskRef,
    UserTaskRunListDTO,
)
from usertasks.schemas.params import ListClaimableTasksParams, ListUserTasksParams


class UserController(TaskOperationsController):
    """Caller-scoped task operations: the server only lets the caller act on
    tasks assigned to them or to one of their groups."""

    _prefix = "/tasks"

    async def list_user_tasks(self, params: ListUserTasksParams) -> UserTaskRunListDTO:
        """One page of tasks assigned to the caller or the caller's groups."""
        data = await self._transport.request(with_query("/tasks", params))
        return UserTaskRunListDTO.model_validate(data)

    async def list_claimable_tasks(
        self, params: ListClaimableTasksParams
    ) -> UserTaskRunListDTO:
        """One page of unassigned tasks of a group the caller belongs to."""
        data = await self._transport.request(with_query("/tasks/claimable", params))
        return UserTaskRunListDTO.model_validate(data)

    async def iter_user_tasks(
        self, params: ListUserTasksParams
    ) -> AsyncIterator[SimpleUserTaskRunDTO]:
        """Every task matching params, following bookmarks until the last page."""

        async def fetch(bookmark: str | None) -> UserTaskRunListDTO:
            return await self.list_user_tasks(params.model_copy(update={"bookmark": bookmark}))

        async for page in paginate(fetch, params.bookmark):
            for task in page.user_tasks:
                yield task

    async def list_my_groups(self) -> UserGroupListDTO:
        data = await self._transport.request("/groups")
        return UserGroupListDTO.model_validate(data)

    async def get_my_user_info(self) -> UserDTO:
        data = await self._transport.request("/userInfo")
        return UserDTO.model_validate(data)

    async def list_comments(self, ref: UserTaskRef) -> list[AuditEventDTO]:
        data = await self._transport.request(self._task_path(ref, "comments"))
        return [AuditEventDTO.model_validate(item) for item in data or []]

    async def post_comment(self, ref: UserTaskRef, comment: str) -> AuditEventDTO:
        data = await self._transport.request(
            self._task_path(ref, "comment"),
            method="POST",
            json=CommentRequest(comment=comment).to_wire(),
        )
        return AuditEventDTO.model_validate(data)

    async def edit_comment(
        self, ref: UserTaskRef, comment_id: int, comment: str
    ) -> AuditEventDTO:
        data = await self._transport.request(
            self._task_path(ref, f"comment/{path_segment(str(comment_id))}"),
            method="PUT",
            json=CommentRequest(comment=comment).to_wire(),
        )
        return AuditEventDTO.model_validate(data)

    async def delete_comment(self, ref: UserTaskRef, comment_id: int) -> AuditEventDTO | None:
        """Delete a comment; returns the deletion event when the server sends one."""
        data = await self._transport.request(
            self._task_path(ref, f"comment/{path_segment(str(comment_id))}"),
            method="DELETE",
        )
        return AuditEventDTO.model_validate(data) if data else None
