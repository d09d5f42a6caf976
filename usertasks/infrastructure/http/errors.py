"""Map non-2xx bridge responses to the typed exception taxonomy.

Status code decides first. 403 and 412 are shared by several failure
kinds on the server, so for those the error message is inspected for
well-known words (case-insensitive). That heuristic depends on the
server's wording and is kept in _classify_by_message() alone.
"""

import httpx

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
from usertasks.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_ERROR = "Unknown error"


def _is_json(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


def extract_error_message(response: httpx.Response) -> str:
    """Return the server's error message, or "Unknown error".

    JSON bodies contribute their ``message`` field; other bodies are used
    as raw text. Any failure while reading or parsing degrades to
    "Unknown error" so a malformed error body never raises a second error.
    """
    try:
        if _is_json(response):
            payload = response.json()
            if isinstance(payload, dict) and payload.get("message"):
                return str(payload["message"])
            return UNKNOWN_ERROR
        return response.text or UNKNOWN_ERROR
    except Exception as e:
        logger.debug("Could not read error body (status=%s): %s", response.status_code, e)
        return UNKNOWN_ERROR


def _read_body(response: httpx.Response) -> str:
    try:
        return response.text
    except Exception as e:
        logger.debug("Could not decode error body (status=%s): %s", response.status_code, e)
        return ""


def _classify_by_message(status_code: int, message: str) -> type[UserTasksException] | None:
    """Pick the error kind for statuses the server overloads; None if not overloaded."""
    lowered = message.lower()
    if status_code == 403:
        if "done" in lowered or "cancelled" in lowered:
            return TaskStateException
        return ForbiddenException
    if status_code == 412:
        if "assign" in lowered or "claim" in lowered:
            return AssignmentException
        return PreconditionFailedException
    return None


_BY_STATUS: dict[int, type[UserTasksException]] = {
    400: ValidationException,
    401: UnauthorizedException,
    404: NotFoundException,
}


def classify_error(status_code: int, message: str, body: str = "") -> UserTasksException:
    """Build the exception for a non-2xx status and its extracted message.

    Args:
        status_code: HTTP status of the response.
        message: Message from extract_error_message().
        body: Raw body, echoed by the catch-all ApiClientException.

    Returns:
        Exception instance (not raised).
    """
    exc_cls = _classify_by_message(status_code, message) or _BY_STATUS.get(status_code)
    if exc_cls is None:
        return ApiClientException(status_code, body, message=f"Error {status_code}: {message}")
    return exc_cls(message=message, status_code=status_code)


def error_from_response(response: httpx.Response) -> UserTasksException:
    """Classify a non-2xx httpx response."""
    message = extract_error_message(response)
    return classify_error(response.status_code, message, _read_body(response))
