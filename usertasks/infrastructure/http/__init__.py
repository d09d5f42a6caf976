"""HTTP layer: query building, authenticated transport, error classification."""

from usertasks.infrastructure.http.errors import (
    classify_error,
    error_from_response,
    extract_error_message,
)
from usertasks.infrastructure.http.query import (
    build_query_string,
    path_segment,
    with_query,
)
from usertasks.infrastructure.http.transport import UserTasksTransport

__all__ = [
    "UserTasksTransport",
    "build_query_string",
    "path_segment",
    "with_query",
    "classify_error",
    "error_from_response",
    "extract_error_message",
]
