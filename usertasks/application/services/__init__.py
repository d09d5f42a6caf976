"""Application services: client-side checks run before calling the bridge."""

from usertasks.application.services.task_results import (
    build_task_result,
    check_task_result,
)

__all__ = ["build_task_result", "check_task_result"]
