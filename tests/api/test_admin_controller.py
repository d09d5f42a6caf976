"""Tests for admin task endpoints."""

import pytest

from tests.conftest import BridgeStub, task_json
from usertasks.client import UserTasksClient
from usertasks.domain.exceptions import NotFoundException
from usertasks.schemas.admin import AssignmentRequest
from usertasks.schemas.common import UserTaskRef
from usertasks.schemas.params import (
    ListAllTasksParams,
    ListUserTaskDefsParams,
    SearchUsersParams,
)

REF = UserTaskRef(wf_run_id="w1", user_task_guid="t1")


async def test_list_all_tasks(client: UserTasksClient, bridge: BridgeStub) -> None:
    bridge.respond(200, json_body={"userTasks": [task_json()], "bookmark": "next"})
    page = await client.admin.list_all_tasks(
        ListAllTasksParams(limit=10, type="approve-invoice", user_id="u1")
    )
    assert page.bookmark == "next"
    assert str(bridge.last.url) == (
        "http://bridge.test/acme/admin/tasks?limit=10&type=approve-invoice&user_id=u1"
    )


async def test_iter_all_tasks_stops_on_missing_bookmark(
    client: UserTasksClient, bridge: BridgeStub
) -> None:
    bridge.respond(200, json_body={"userTasks": [task_json(id="a")], "bookmark": "b1"})
    bridge.respond(200, json_body={"userTasks": [task_json(id="b")]})
    params = ListAllTasksParams(limit=1, type="approve-invoice")
    ids = [t.id async for t in client.admin.iter_all_tasks(params)]
    assert ids == ["a", "b"]
    assert len(bridge.requests) == 2


async def test_admin_task_operations_use_admin_prefix(
    client: UserTasksClient, bridge: BridgeStub
) -> None:
    await client.admin.cancel_user_task(REF)
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/tasks/w1/t1/cancel"
    await client.admin.claim_user_task(REF)
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/tasks/w1/t1/claim"
    bridge.respond(
        200,
        json_body=task_json(
            events=[
                {
                    "time": "2024-05-01T10:05:00.000Z",
                    "type": "TASK_CANCELLED",
                    "event": {"message": "no longer needed"},
                }
            ]
        ),
    )
    detail = await client.admin.get_user_task(REF)
    assert detail.events[0].event.message == "no longer needed"
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/tasks/w1/t1"


async def test_assign_user_task(client: UserTasksClient, bridge: BridgeStub) -> None:
    await client.admin.assign_user_task(REF, AssignmentRequest(user_id="u2", user_group="ops"))
    assert bridge.last.method == "POST"
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/tasks/w1/t1/assign"
    assert bridge.last_json() == {"userId": "u2", "userGroup": "ops"}


async def test_user_task_defs(client: UserTasksClient, bridge: BridgeStub) -> None:
    bridge.respond(200, json_body={"userTaskDefNames": ["a", "b"], "bookmark": "x"})
    page = await client.admin.list_user_task_defs(ListUserTaskDefsParams(limit=2))
    assert page.user_task_def_names == ["a", "b"]
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/taskTypes?limit=2"

    bridge.respond(200, json_body={"userTaskDefNames": ["a"], "bookmark": "x"})
    bridge.respond(200, json_body={"userTaskDefNames": ["b"], "bookmark": None})
    names = [name async for name in client.admin.iter_user_task_defs(limit=1)]
    assert names == ["a", "b"]
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/taskTypes?limit=1&bookmark=x"


async def test_users_and_groups(client: UserTasksClient, bridge: BridgeStub) -> None:
    bridge.respond(200, json_body={"groups": [{"id": "g1", "name": "finance"}]})
    assert (await client.admin.list_groups()).groups[0].id == "g1"
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/groups"

    bridge.respond(200, json_body={"users": [{"id": "u1", "email": "ana@example.com"}]})
    users = await client.admin.list_users(SearchUsersParams(email="ana@example.com", max_results=5))
    assert users.users[0].id == "u1"
    assert str(bridge.last.url) == (
        "http://bridge.test/acme/admin/users?email=ana%40example.com&max_results=5"
    )

    bridge.respond(200, json_body={"users": []})
    await client.admin.list_users()
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/users"

    bridge.respond(404, json_body={"message": "user not found"})
    with pytest.raises(NotFoundException):
        await client.admin.get_user("u9")
    assert str(bridge.last.url) == "http://bridge.test/acme/admin/users/u9"
