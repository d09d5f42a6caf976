"""Tests for wire DTO parsing and request serialization."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tests.conftest import task_json
from usertasks.domain.enums import UserTaskEventType, UserTaskFieldType, UserTaskStatus
from usertasks.schemas.admin import AssignmentRequest, UserTaskDefListDTO
from usertasks.schemas.common import (
    AuditEventDTO,
    DetailedUserTaskRunDTO,
    RawAuditEvent,
    SimpleUserTaskRunDTO,
    UserTaskAssignedEvent,
    UserTaskCommentEvent,
    UserTaskExecutedEvent,
    UserTaskRef,
    UserTaskVariableValue,
)
from usertasks.schemas.user_management import UpsertPasswordRequest


def test_simple_task_parses_camel_case() -> None:
    task = SimpleUserTaskRunDTO.model_validate(task_json())
    assert task.wf_run_id == "w1"
    assert task.user_task_def_name == "approve-invoice"
    assert task.status is UserTaskStatus.ASSIGNED
    assert task.user is not None and task.user.valid is True
    assert task.user_group is not None and task.user_group.name == "finance"
    assert task.scheduled_time == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert task.ref == UserTaskRef(wf_run_id="w1", user_task_guid="t1")


def test_unassigned_task_without_user_or_group() -> None:
    data = task_json(status="UNASSIGNED")
    del data["user"], data["userGroup"]
    task = SimpleUserTaskRunDTO.model_validate(data)
    assert task.user is None and task.user_group is None


def test_unknown_status_is_rejected() -> None:
    with pytest.raises(ValidationError):
        SimpleUserTaskRunDTO.model_validate(task_json(status="PAUSED"))


def test_terminal_statuses() -> None:
    assert UserTaskStatus.DONE.is_terminal
    assert UserTaskStatus.CANCELLED.is_terminal
    assert not UserTaskStatus.ASSIGNED.is_terminal
    assert UserTaskStatus.values() == ["UNASSIGNED", "ASSIGNED", "DONE", "CANCELLED"]


def test_ref_requires_both_ids() -> None:
    with pytest.raises(ValidationError):
        UserTaskRef(wf_run_id="w1", user_task_guid="")
    with pytest.raises(ValidationError):
        UserTaskRef(user_task_guid="t1")


def test_detailed_task_with_fields_results_and_events() -> None:
    data = task_json(
        status="DONE",
        fields=[
            {"name": "approved", "displayName": "Approved?", "required": True, "type": "BOOLEAN"},
            {"name": "amount", "required": False, "type": "DOUBLE"},
        ],
        results={
            "approved": {"type": "BOOLEAN", "value": True},
            "amount": {"type": "DOUBLE", "value": 12.5},
        },
        events=[
            {
                "time": "2024-05-01T10:05:00.000Z",
                "type": "TASK_ASSIGNED",
                "event": {"newUserId": "u1", "oldUserGroup": "finance"},
            },
            {
                "time": "2024-05-01T10:09:00.000Z",
                "type": "COMMENTED",
                "event": {"comment": "looks fine", "userId": "u1", "commentId": 1},
            },
            {
                "time": "2024-05-01T10:10:00.000Z",
                "type": "TASK_EXECUTED",
                "event": {"wfRunId": "w1", "userTaskGuid": "t1"},
            },
        ],
    )
    detail = DetailedUserTaskRunDTO.model_validate(data)
    assert [f.type for f in detail.fields] == [UserTaskFieldType.BOOLEAN, UserTaskFieldType.DOUBLE]
    assert detail.fields[0].display_name == "Approved?"
    assert detail.results["approved"].value is True
    assert detail.results["amount"].value == 12.5
    events = detail.events
    assert isinstance(events[0].event, UserTaskAssignedEvent)
    assert events[0].event.new_user_id == "u1"
    assert isinstance(events[1].event, UserTaskCommentEvent)
    assert events[1].event.comment_id == 1
    assert isinstance(events[2].event, UserTaskExecutedEvent)
    assert events[2].type is UserTaskEventType.TASK_EXECUTED


def test_audit_event_with_unknown_type_keeps_raw_payload() -> None:
    event = AuditEventDTO.model_validate(
        {"time": "2024-05-01T10:05:00.000Z", "type": "TASK_PAUSED", "event": {"reason": "x"}}
    )
    assert event.type == "TASK_PAUSED"
    assert not isinstance(event.type, UserTaskEventType)
    assert isinstance(event.event, RawAuditEvent)
    assert event.event.model_extra == {"reason": "x"}


def test_completed_and_comment_added_events() -> None:
    added = AuditEventDTO.model_validate(
        {
            "time": "2024-05-01T10:05:00.000Z",
            "type": "COMMENT_ADDED",
            "event": {"comment": "hi", "userId": "u1", "commentId": 3},
        }
    )
    assert added.type is UserTaskEventType.COMMENT_ADDED
    assert isinstance(added.event, UserTaskCommentEvent)
    assert added.is_comment

    completed = AuditEventDTO.model_validate(
        {"time": "2024-05-01T10:06:00.000Z", "type": "TASK_COMPLETED", "event": {}}
    )
    assert completed.type is UserTaskEventType.TASK_COMPLETED
    assert isinstance(completed.event, RawAuditEvent)


def test_group_that_no_longer_resolves_has_no_name() -> None:
    task = SimpleUserTaskRunDTO.model_validate(
        task_json(userGroup={"id": "gone", "valid": False})
    )
    assert task.user_group is not None
    assert task.user_group.name is None


def test_variable_value_keeps_json_types() -> None:
    assert UserTaskVariableValue.model_validate({"type": "INTEGER", "value": 3}).value == 3
    assert isinstance(
        UserTaskVariableValue.model_validate({"type": "INTEGER", "value": 3}).value, int
    )
    assert UserTaskVariableValue.model_validate({"type": "STRING", "value": "3"}).value == "3"
    assert (
        UserTaskVariableValue.model_validate({"type": "BOOLEAN", "value": False}).value is False
    )


def test_assignment_request_serializes_with_aliases() -> None:
    assert AssignmentRequest(user_id="u1").to_wire() == {"userId": "u1"}
    assert AssignmentRequest(user_group="finance").to_wire() == {"userGroup": "finance"}


def test_assignment_request_needs_a_target() -> None:
    with pytest.raises(ValidationError):
        AssignmentRequest()


def test_task_def_list_null_bookmark() -> None:
    page = UserTaskDefListDTO.model_validate({"userTaskDefNames": ["a"], "bookmark": None})
    assert page.user_task_def_names == ["a"]
    assert page.bookmark is None


def test_upsert_password_defaults_to_permanent() -> None:
    assert UpsertPasswordRequest(password="s3cret").to_wire() == {
        "password": "s3cret",
        "temporary": False,
    }
