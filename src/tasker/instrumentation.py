"""Operation-scoped logging and timing."""

from __future__ import annotations

import logging
import time
from collections.abc import MutableMapping
from types import TracebackType
from typing import Any


class OperationLogger(logging.LoggerAdapter):
    """Logger adapter that tags every record with the current operation."""

    def __init__(self, logger: logging.Logger, operation: str) -> None:
        super().__init__(logger, {"operation": operation})

    @property
    def operation(self) -> str:
        return self.extra["operation"]  # type: ignore[index]

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**kwargs.get("extra", {}), **self.extra}  # type: ignore[dict-item]
        return msg, kwargs


class OperationTimer:
    """Context manager that logs the start, outcome and duration of an operation.

    Call ``complete()`` once the operation has succeeded. Leaving the block
    without it is reported as ``not completed``; leaving it with an exception
    is reported as ``failed`` and the exception propagates.

    Example:

        with OperationTimer(logger, "add_task") as timer:
            timer.log.info("Adding task")
            store.add(title, description)
            timer.complete()
    """

    def __init__(self, logger: logging.Logger, name: str) -> None:
        self.name = name
        self.log = OperationLogger(logger, name)
        self.completed = False
        self.status: str | None = None
        self.elapsed_ms: float | None = None
        self._start = 0.0

    def complete(self) -> None:
        """Mark the operation as successfully finished."""
        self.completed = True

    def __enter__(self) -> OperationTimer:
        self._start = time.perf_counter()
        self.log.info("Operation started: %s", self.name, extra={"event": "operation.start"})
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.elapsed_ms = round((time.perf_counter() - self._start) * 1000, 2)

        if exc_type is not None:
            self.status = "failed"
        elif self.completed:
            self.status = "succeeded"
        else:
            self.status = "not completed"

        self.log.info(
            "Operation finished: %s (%s) in %.2f ms",
            self.name,
            self.status,
            self.elapsed_ms,
            extra={
                "event": "operation.end",
                "status": self.status,
                "elapsed_ms": self.elapsed_ms,
            },
        )
