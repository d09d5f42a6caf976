"""Identity-provider group management (admin only)."""

from __future__ import annotations

from usertasks.client.base import BaseController
from usertasks.infrastructure.http.query import path_segment, with_query
from usertasks.schemas.group_management import (
    CreateGroupRequest,
    IDPGroupListDTO,
    UpdateGroupRequest,
)
from usertasks.schemas.params import SearchGroupsParams


def _orphan_flag(ignore_orphan_tasks: bool) -> dict[str, bool | None]:
    return {"ignoreOrphanTasks": True if ignore_orphan_tasks else None}


class GroupManagementController(BaseController):
    async def create_group(self, request: CreateGroupRequest) -> None:
        await self._transport.request(
            "/management/groups", method="POST", json=request.to_wire()
        )

    async def list_groups(self, params: SearchGroupsParams | None = None) -> IDPGroupListDTO:
        data = await self._transport.request(with_query("/management/groups", params))
        return IDPGroupListDTO.model_validate(data)

    async def update_group(
        self,
        group_id: str,
        request: UpdateGroupRequest,
        ignore_orphan_tasks: bool = False,
    ) -> None:
        """Rename a group; tasks assigned by the old name need ignore_orphan_tasks."""
        path = with_query(
            f"/management/groups/{path_segment(group_id)}",
            _orphan_flag(ignore_orphan_tasks),
        )
        await self._transport.request(path, method="PUT", json=request.to_wire())

    async def delete_group(self, group_id: str, ignore_orphan_tasks: bool = False) -> None:
        path = with_query(
            f"/management/groups/{path_segment(group_id)}",
            _orphan_flag(ignore_orphan_tasks),
        )
        await self._transport.request(path, method="DELETE")
