"""Pytest configuration and fixtures for the bridge client.

HTTP is faked with httpx.MockTransport: BridgeStub records every request
and answers with queued responses (204 when the queue is empty), so no
test needs a running server.
"""

import json
from collections.abc import AsyncIterator, Iterator
from typing import Any

import httpx
import pytest

from usertasks.client import UserTasksClient
from usertasks.core.config import get_settings

BASE_URL = "http://bridge.test"
TENANT_ID = "acme"
ACCESS_TOKEN = "token-123"


class BridgeStub:
    """Records requests and replays queued responses in order."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def respond(
        self,
        status_code: int = 200,
        *,
        json_body: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> "BridgeStub":
        if json_body is not None:
            response = httpx.Response(status_code, json=json_body, headers=headers)
        elif text is not None:
            response = httpx.Response(status_code, text=text, headers=headers)
        else:
            response = httpx.Response(status_code, headers=headers)
        self._responses.append(response)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(204)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def bridge() -> BridgeStub:
    return BridgeStub()


@pytest.fixture
async def http_client(bridge: BridgeStub) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(bridge)) as ac:
        yield ac


@pytest.fixture
def client(http_client: httpx.AsyncClient) -> UserTasksClient:
    """Client bound to the stub; constructed without the /init check."""
    return UserTasksClient(BASE_URL, TENANT_ID, ACCESS_TOKEN, http_client=http_client)


def task_json(**overrides: Any) -> dict[str, Any]:
    """Wire representation of a SimpleUserTaskRunDTO."""
    data = {
        "id": "t1",
        "wfRunId": "w1",
        "userTaskDefName": "approve-invoice",
        "status": "ASSIGNED",
        "user": {"id": "u1", "email": "ana@example.com", "valid": True},
        "userGroup": {"id": "g1", "name": "finance", "valid": True},
        "notes": "check totals",
        "scheduledTime": "2024-05-01T10:00:00.000Z",
    }
    data.update(overrides)
    return data
