"""Errors raised by the task store."""

from __future__ import annotations


class TaskerError(Exception):
    """Base class for recoverable task operation errors."""


class ValidationError(TaskerError):
    """Input to an operation failed a precondition."""


class NotFoundError(TaskerError):
    """No task exists with the requested id."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"No task with id {task_id}")
