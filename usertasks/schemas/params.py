"""Query parameters of the list and search endpoints.

Field order is the order the parameters appear in the query string;
names are the bridge's snake_case query names.
"""

from datetime import datetime

from pydantic import Field

from usertasks.domain.enums import UserTaskStatus
from usertasks.schemas.base import QueryParams


class ListUserTasksParams(QueryParams):
    """GET /tasks: tasks assigned to the caller or to one of the caller's groups."""

    limit: int = Field(..., gt=0)
    status: UserTaskStatus | None = None
    type: str | None = None
    user_group_id: str | None = None
    earliest_start_date: datetime | None = None
    latest_start_date: datetime | None = None
    bookmark: str | None = None


class ListClaimableTasksParams(QueryParams):
    """GET /tasks/claimable: unassigned tasks of one of the caller's groups."""

    limit: int = Field(..., gt=0)
    user_group_id: str
    earliest_start_date: datetime | None = None
    latest_start_date: datetime | None = None
    bookmark: str | None = None


class ListAllTasksParams(QueryParams):
    """GET /admin/tasks: every task of one UserTaskDef, any assignee."""

    limit: int = Field(..., gt=0)
    type: str
    status: UserTaskStatus | None = None
    user_id: str | None = None
    user_group_id: str | None = None
    earliest_start_date: datetime | None = None
    latest_start_date: datetime | None = None
    bookmark: str | None = None


class ListUserTaskDefsParams(QueryParams):
    limit: int = Field(..., gt=0)
    bookmark: str | None = None


class SearchUsersParams(QueryParams):
    """Identity-provider user search (offset pagination, not bookmarks)."""

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    user_group_id: str | None = None
    first_result: int | None = Field(default=None, ge=0)
    max_results: int | None = Field(default=None, gt=0)


class SearchGroupsParams(QueryParams):
    name: str | None = None
    first_result: int | None = Field(default=None, ge=0)
    max_results: int | None = Field(default=None, gt=0)
