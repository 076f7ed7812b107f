"""In-memory task store.

The store owns every Task and the id counter. It performs no I/O: callers
are responsible for logging and for reporting the errors it raises.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from tasker.errors import NotFoundError, ValidationError
from tasker.models import CompletionOutcome, Task


class TaskStore:
    """Owns the task collection and assigns ids.

    Ids start at 1 and only ever increase; a deleted task's id is never
    handed out again.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._clock = clock

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        """Id the next successful ``add`` will assign."""
        return self._next_id

    def add(self, title: str, description: str = "") -> Task:
        """Create a task and append it to the store.

        Args:
            title: Task title; surrounding whitespace is stripped.
            description: Free text, may be empty.

        Returns:
            The newly created task.

        Raises:
            ValidationError: If the title is empty or only whitespace.
        """
        title = title.strip()
        if not title:
            raise ValidationError("Task title must not be empty or whitespace")

        task = Task(
            id=self._next_id,
            title=title,
            description=description,
            created_at=self._clock(),
        )
        self._next_id += 1
        self._tasks.append(task)
        return task

    def delete(self, task_id: int) -> None:
        """Remove a task permanently.

        Raises:
            NotFoundError: If no task has the given id.
        """
        self._tasks.remove(self._find(task_id))

    def complete(self, task_id: int) -> CompletionOutcome:
        """Mark a task as completed.

        Tasks are immutable, so the stored task is replaced by a completed
        copy; fetch it again through ``list`` to see the new state.
        Completing an already completed task changes nothing and returns
        ``CompletionOutcome.ALREADY_COMPLETED``.

        Raises:
            NotFoundError: If no task has the given id.
        """
        task = self._find(task_id)
        if task.is_completed:
            return CompletionOutcome.ALREADY_COMPLETED

        completed = Task.model_validate(
            {
                **task.model_dump(),
                "is_completed": True,
                "completed_at": max(self._clock(), task.created_at),
            }
        )
        self._tasks[self._tasks.index(task)] = completed
        return CompletionOutcome.COMPLETED

    def _find(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    def list(self) -> list[Task]:
        """Return all tasks in creation order."""
        return list(self._tasks)
