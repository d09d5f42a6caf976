"""Domain layer: wire enums and the client's exception taxonomy.

No dependencies on HTTP or configuration.
"""

from usertasks.domain.enums import (
    IdentityProviderVendor,
    UserTaskEventType,
    UserTaskFieldType,
    UserTaskStatus,
)
from usertasks.domain.exceptions import (
    ApiClientException,
    AssignmentException,
    ForbiddenException,
    NotFoundException,
    PreconditionFailedException,
    TaskStateException,
    UnauthorizedException,
    UserTasksException,
    ValidationException,
)

__all__ = [
    "IdentityProviderVendor",
    "UserTaskEventType",
    "UserTaskFieldType",
    "UserTaskStatus",
    "ApiClientException",
    "AssignmentException",
    "ForbiddenException",
    "NotFoundException",
    "PreconditionFailedException",
    "TaskStateException",
    "UnauthorizedException",
    "UserTasksException",
    "ValidationException",
]
