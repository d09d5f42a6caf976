"""Domain enumerations for the User Tasks Bridge.

Enums represent fixed sets of wire values exchanged with the bridge API
(task status, field types, audit event types, identity provider vendors).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class UserTaskStatus(_ValuesMixin, str, Enum):
    """UserTask lifecycle status.

    DONE and CANCELLED are terminal: the server rejects any further
    claim, assign, complete or cancel on a task in either state.
    """

    UNASSIGNED = "UNASSIGNED"
    ASSIGNED = "ASSIGNED"
    DONE = "DONE"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (UserTaskStatus.DONE, UserTaskStatus.CANCELLED)


class UserTaskFieldType(_ValuesMixin, str, Enum):
    """Type tag of a UserTaskDef field and of a submitted result value."""

    DOUBLE = "DOUBLE"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    INTEGER = "INTEGER"
    UNRECOGNIZED = "UNRECOGNIZED"


class UserTaskEventType(_ValuesMixin, str, Enum):
    """Audit event types attached to a task's history."""

    TASK_EXECUTED = "TASK_EXECUTED"
    TASK_ASSIGNED = "TASK_ASSIGNED"
    TASK_CANCELLED = "TASK_CANCELLED"
    TASK_COMPLETED = "TASK_COMPLETED"
    COMMENTED = "COMMENTED"
    COMMENT_ADDED = "COMMENT_ADDED"
    COMMENT_EDITED = "COMMENT_EDITED"
    COMMENT_DELETED = "COMMENT_DELETED"


class IdentityProviderVendor(_ValuesMixin, str, Enum):
    """Identity provider vendors a tenant can be configured with."""

    KEYCLOAK = "KEYCLOAK"
    AUTH0 = "AUTH0"
    OKTA = "OKTA"
    ZITADEL = "ZITADEL"
