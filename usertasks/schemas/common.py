"""Task, user and audit DTOs shared by the user and admin endpoints."""

from datetime import datetime
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from usertasks.domain.enums import (
    UserTaskEventType,
    UserTaskFieldType,
    UserTaskStatus,
)
from usertasks.schemas.base import WireModel


class UserTaskRef(BaseModel):
    """Address of one UserTaskRun: workflow run id plus task guid.

    Every task operation takes a ref; a task id alone is not unique.
    """

    model_config = ConfigDict(frozen=True)

    wf_run_id: str = Field(..., min_length=1)
    user_task_guid: str = Field(..., min_length=1)


class UserDTO(WireModel):
    """User as seen by the bridge; valid is False once the IdP no longer knows it."""

    id: str
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    valid: bool | None = None


class UserGroupDTO(WireModel):
    """Group as seen by the bridge; an unresolvable group has only id and valid=False."""

    id: str
    name: str | None = None
    valid: bool | None = None


class UserGroupListDTO(WireModel):
    groups: list[UserGroupDTO] = Field(default_factory=list)


class UserTaskVariableValue(WireModel):
    """One submitted result value with its type tag."""

    type: UserTaskFieldType
    value: bool | int | float | str


class SimpleUserTaskRunDTO(WireModel):
    id: str
    wf_run_id: str
    user_task_def_name: str
    user_group: UserGroupDTO | None = None
    user: UserDTO | None = None
    status: UserTaskStatus
    notes: str | None = None
    scheduled_time: datetime | None = None

    @property
    def ref(self) -> UserTaskRef:
        return UserTaskRef(wf_run_id=self.wf_run_id, user_task_guid=self.id)


class UserTaskRunListDTO(WireModel):
    """One page of tasks; bookmark is None on the last page."""

    user_tasks: list[SimpleUserTaskRunDTO] = Field(default_factory=list)
    bookmark: str | None = None


class UserTaskFieldDTO(WireModel):
    """Field definition of a UserTaskDef."""

    name: str
    display_name: str | None = None
    description: str | None = None
    required: bool = False
    type: UserTaskFieldType
    options: list[str] | None = None


class UserTaskExecutedEvent(WireModel):
    wf_run_id: str
    user_task_guid: str


class UserTaskAssignedEvent(WireModel):
    old_user_id: str | None = None
    old_user_group: str | None = None
    new_user_id: str | None = None
    new_user_group: str | None = None


class UserTaskCancelledEvent(WireModel):
    message: str | None = None


class UserTaskCommentEvent(WireModel):
    """Payload of COMMENTED, COMMENT_ADDED and COMMENT_EDITED events."""

    comment: str
    user_id: str | None = None
    comment_id: int


class UserTaskCommentDeletedEvent(WireModel):
    comment_id: int
    user_id: str | None = None


class RawAuditEvent(WireModel):
    """Payload of an event type without a typed model; fields stay in model_extra."""

    model_config = ConfigDict(extra="allow")


AuditEventPayload = Union[
    UserTaskExecutedEvent,
    UserTaskAssignedEvent,
    UserTaskCancelledEvent,
    UserTaskCommentEvent,
    UserTaskCommentDeletedEvent,
    RawAuditEvent,
]

_PAYLOAD_BY_TYPE: dict[UserTaskEventType, type[WireModel]] = {
    UserTaskEventType.TASK_EXECUTED: UserTaskExecutedEvent,
    UserTaskEventType.TASK_ASSIGNED: UserTaskAssignedEvent,
    UserTaskEventType.TASK_CANCELLED: UserTaskCancelledEvent,
    UserTaskEventType.COMMENTED: UserTaskCommentEvent,
    UserTaskEventType.COMMENT_ADDED: UserTaskCommentEvent,
    UserTaskEventType.COMMENT_EDITED: UserTaskCommentEvent,
    UserTaskEventType.COMMENT_DELETED: UserTaskCommentDeletedEvent,
}


class AuditEventDTO(WireModel):
    """Timestamped entry of a task's history; event is parsed by type.

    A type this client does not know keeps its raw string and its payload
    becomes a RawAuditEvent, so one new event kind does not fail a whole
    history or comment listing.
    """

    time: datetime
    type: UserTaskEventType | str
    event: AuditEventPayload

    @model_validator(mode="before")
    @classmethod
    def _parse_event_by_type(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        raw_type = data.get("type")
        event = data.get("event")
        if raw_type in UserTaskEventType.values():
            event_type = UserTaskEventType(raw_type)
            payload_cls = _PAYLOAD_BY_TYPE.get(event_type, RawAuditEvent)
        else:
            event_type = raw_type
            payload_cls = RawAuditEvent
        data = {**data, "type": event_type}
        if isinstance(event, dict):
            data["event"] = payload_cls.model_validate(event)
        return data

    @property
    def is_comment(self) -> bool:
        """True for events that carry a live comment (added or edited)."""
        return self.type in (
            UserTaskEventType.COMMENTED,
            UserTaskEventType.COMMENT_ADDED,
            UserTaskEventType.COMMENT_EDITED,
        )


class DetailedUserTaskRunDTO(SimpleUserTaskRunDTO):
    """Task with its definition's fields, submitted results and (admin) history."""

    fields: list[UserTaskFieldDTO] = Field(default_factory=list)
    results: dict[str, UserTaskVariableValue] | None = None
    events: list[AuditEventDTO] | None = None


class CommentRequest(WireModel):
    comment: str = Field(..., min_length=1)
