"""Data models for tasker."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CompletionOutcome(Enum):
    """Result of marking a task as completed."""

    COMPLETED = "Task marked as completed"
    ALREADY_COMPLETED = "Task was already completed"


class Task(BaseModel):
    """A single to-do item.

    Tasks are created by ``TaskStore.add``; the store is the only place that
    assigns ids or replaces a task with its completed copy. Tasks are frozen,
    so the completion invariant holds for every instance handed out.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    title: str = Field(min_length=1)
    description: str = ""
    is_completed: bool = False
    created_at: datetime
    completed_at: datetime | None = None

    @model_validator(mode="after")
    def _check_completion(self) -> Task:
        if self.is_completed != (self.completed_at is not None):
            raise ValueError("completed_at must be set exactly when the task is completed")
        if self.completed_at is not None and self.completed_at < self.created_at:
            raise ValueError("completed_at must not be earlier than created_at")
        return self

    @property
    def status(self) -> str:
        """Human-readable completion status."""
        if self.completed_at is not None:
            return f"completed ({self.completed_at:%Y-%m-%d %H:%M:%S})"
        return "in progress"

    def __str__(self) -> str:
        return f"[{self.id}] {self.title} - {self.description} ({self.status})"
