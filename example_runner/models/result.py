"""Models for example execution results."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

type ExampleStatus = Literal["not_started", "started", "passed", "failed", "pending"]
type TerminalStatus = Literal["passed", "failed", "pending"]

TERMINAL_STATUSES: frozenset[ExampleStatus] = frozenset({"passed", "failed", "pending"})


class InvalidStatusTransitionError(Exception):
    """Raised when an execution result would move backwards in its lifecycle."""


@dataclass(kw_only=True)
class ExecutionResult:
    """Timestamps and final status of a single example run.

    Only the example that owns the result writes to it, and only while that
    example is running. ``run_time`` is recorded together with the terminal
    status and never on its own.
    """

    status: ExampleStatus = "not_started"
    started_at: datetime | None = None
    finished_at: datetime | None = None
    run_time: float | None = None
    exception: Exception | None = None
    pending_message: str | None = None
    pending_fixed: bool | None = None
    pending_exception: Exception | None = None

    @property
    def finished(self) -> bool:
        """Whether a terminal status has been recorded."""
        return self.status in TERMINAL_STATUSES

    def record_started(self, started_at: datetime) -> None:
        """Move the result from ``not_started`` to ``started``."""
        if self.status != "not_started":
            raise InvalidStatusTransitionError(
                f"Cannot start an example whose status is '{self.status}'"
            )
        self.status = "started"
        self.started_at = started_at

    def record_finished(
        self,
        status: TerminalStatus,
        finished_at: datetime,
        *,
        exception: Exception | None = None,
        pending_message: str | None = None,
    ) -> None:
        """Record the terminal status together with its timing."""
        if self.status != "started" or self.started_at is None:
            raise InvalidStatusTransitionError(
                f"Cannot finish an example whose status is '{self.status}'"
            )
        self.status = status
        self.finished_at = finished_at
        self.run_time = (finished_at - self.started_at).total_seconds()
        self.exception = exception
        if pending_message is not None:
            self.pending_message = pending_message
