"""Typed async client for the User Tasks Bridge API."""

from usertasks.client import UserTasksClient
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
from usertasks.schemas.common import UserTaskRef

__all__ = [
    "UserTasksClient",
    "UserTaskRef",
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
