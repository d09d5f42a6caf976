"""Exceptions raised by the User Tasks Bridge client.

Every non-2xx response from the bridge becomes exactly one subclass of
UserTasksException, so callers can branch on the type instead of
comparing strings. Embedding applications map these to user-facing
messages; the client itself never recovers from them.
"""

from typing import Any


class UserTasksException(Exception):
    """Base exception for all User Tasks Bridge client errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. status_code, field).
    """

    default_message = "User Tasks Bridge request failed"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description; defaults to the
                class's default_message.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message or self.default_message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int | None:
        """HTTP status that produced this error, if it came from a response."""
        return self.details.get("status_code")


class _HttpErrorMixin:
    """Shared constructor for errors derived from an HTTP status."""

    error_code_value: str
    default_status: int

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(  # type: ignore[call-arg]
            message,
            self.error_code_value,
            {"status_code": status_code or self.default_status},
        )


class UnauthorizedException(_HttpErrorMixin, UserTasksException):
    """Authentication is missing, expired or invalid (401)."""

    default_message = "Unauthorized - Authentication is required to access this resource"
    error_code_value = "UNAUTHORIZED"
    default_status = 401


class ForbiddenException(_HttpErrorMixin, UserTasksException):
    """The caller lacks permission for the operation (403)."""

    default_message = "Forbidden - You do not have permission to perform this action"
    error_code_value = "FORBIDDEN"
    default_status = 403


class NotFoundException(_HttpErrorMixin, UserTasksException):
    """The task, user, group or definition does not exist (404)."""

    default_message = "Not found - The requested resource does not exist"
    error_code_value = "NOT_FOUND"
    default_status = 404


class PreconditionFailedException(_HttpErrorMixin, UserTasksException):
    """The request cannot be completed in the resource's current state (412)."""

    default_message = (
        "Precondition failed - The request cannot be completed in the current state"
    )
    error_code_value = "PRECONDITION_FAILED"
    default_status = 412


class TaskStateException(_HttpErrorMixin, UserTasksException):
    """The task is DONE or CANCELLED and can no longer be modified."""

    default_message = (
        "Task state error - The task is in an invalid state for this operation"
    )
    error_code_value = "TASK_STATE_ERROR"
    default_status = 403


class AssignmentException(_HttpErrorMixin, UserTasksException):
    """Claiming or assigning the task was rejected."""

    default_message = (
        "Assignment error - The task cannot be assigned in its current state"
    )
    error_code_value = "ASSIGNMENT_ERROR"
    default_status = 412


class ValidationException(UserTasksException):
    """Request data was rejected (400) or failed client-side validation."""

    default_message = "Validation error - The provided data is invalid"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        field: str | None = None,
    ) -> None:
        """Initialize with message, optional HTTP status and optional field.

        Args:
            message: Description of the validation failure.
            status_code: 400 when raised from a response; None when raised
                before any request was sent.
            field: Optional task field that failed validation.
        """
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)


class ApiClientException(UserTasksException):
    """Unexpected status code; carries the status and the raw error body."""

    def __init__(self, status_code: int, body: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Request failed with status {status_code}: {body}",
            "API_CLIENT_ERROR",
            {"status_code": status_code, "body": body},
        )
        self.body = body
