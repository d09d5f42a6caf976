"""Shared plumbing for resource controllers."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from typing import Any, Protocol, TypeVar

from usertasks.application.services.task_results import (
    build_task_result,
    check_task_result,
)
from usertasks.infrastructure.http.query import path_segment
from usertasks.infrastructure.http.transport import UserTasksTransport
from usertasks.schemas.common import (
    DetailedUserTaskRunDTO,
    UserTaskFieldDTO,
    UserTaskRef,
    UserTaskVariableValue,
)


class _Page(Protocol):
    bookmark: str | None


PageT = TypeVar("PageT", bound=_Page)


async def paginate(
    fetch_page: Callable[[str | None], Awaitable[PageT]],
    bookmark: str | None = None,
) -> AsyncIterator[PageT]:
    """Yield pages, passing each page's bookmark to the next fetch.

    The first fetch uses the given bookmark (None for the first page).
    Stops after the first page whose bookmark is absent. Ordering is
    whatever the server returns.
    """
    while True:
        page = await fetch_page(bookmark)
        yield page
        bookmark = page.bookmark
        if not bookmark:
            return


class BaseController:
    """Holds the transport; subclasses compose paths and parse DTOs."""

    def __init__(self, transport: UserTasksTransport) -> None:
        self._transport = transport


class TaskOperationsController(BaseController):
    """get / complete / cancel / claim on one task under a path prefix.

    The user-scoped prefix acts only on the caller's tasks; the admin
    prefix acts on any task of the tenant.
    """

    _prefix: str

    def _task_path(self, ref: UserTaskRef, action: str | None = None) -> str:
        path = (
            f"{self._prefix}/{path_segment(ref.wf_run_id)}"
            f"/{path_segment(ref.user_task_guid)}"
        )
        return f"{path}/{action}" if action else path

    async def get_user_task(self, ref: UserTaskRef) -> DetailedUserTaskRunDTO:
        """Task details including its UserTaskDef fields."""
        data = await self._transport.request(self._task_path(ref))
        return DetailedUserTaskRunDTO.model_validate(data)

    async def complete_user_task(
        self,
        ref: UserTaskRef,
        results: Mapping[str, UserTaskVariableValue],
        fields: list[UserTaskFieldDTO] | None = None,
    ) -> None:
        """Submit results; the task transitions to DONE on success.

        When fields is given the mapping is checked against them first and
        nothing is sent if a name, type tag or required field is wrong.
        """
        if fields is not None:
            check_task_result(fields, results)
        body = {name: value.to_wire() for name, value in results.items()}
        await self._transport.request(
            self._task_path(ref, "result"), method="POST", json=body
        )

    async def complete_user_task_with_values(
        self,
        ref: UserTaskRef,
        values: Mapping[str, Any],
        fields: list[UserTaskFieldDTO] | None = None,
    ) -> None:
        """Coerce raw values by field type, check required fields, then complete.

        When fields is None the task is fetched first to read its definition.
        """
        if fields is None:
            fields = (await self.get_user_task(ref)).fields
        results = build_task_result(fields, values)
        await self.complete_user_task(ref, results)

    async def cancel_user_task(self, ref: UserTaskRef) -> None:
        """Transition the task to CANCELLED."""
        await self._transport.request(self._task_path(ref, "cancel"), method="POST")

    async def claim_user_task(self, ref: UserTaskRef) -> None:
        """Assign the task to the requesting user."""
        await self._transport.request(self._task_path(ref, "claim"), method="POST")
