"""Run report model for one gate invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from commit_gate.executor.domain.errors import GateFailedError
from commit_gate.executor.domain.task_outcome import TaskOutcome
from commit_gate.executor.domain.task_status import TaskStatus

FAILURE_SEPARATOR = "\n"


@dataclass
class RunReport:
    """Aggregate of every task outcome of one run.

    Outcomes are kept in task registration order, whatever order the tasks
    actually finished in. A report is built fresh for each run and never stored.

    Attributes:
        run_id: Unique identifier for this run
        outcomes: Task outcomes in registration order
        total_execution_time: Wall time of the whole run in seconds
        metadata: Additional metadata about the run
    """

    run_id: str
    outcomes: list[TaskOutcome] = field(default_factory=list)
    total_execution_time: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the run report."""
        if not self.run_id:
            raise ValueError("run_id must not be empty")
        if self.total_execution_time < 0:
            raise ValueError("total_execution_time must be non-negative")

    @property
    def has_failures(self) -> bool:
        """True iff at least one outcome is a recoverable failure."""
        return any(outcome.is_failure for outcome in self.outcomes)

    @property
    def is_successful(self) -> bool:
        """True if the gate passes. An empty report passes."""
        return not self.has_failures

    @property
    def failures(self) -> list[TaskOutcome]:
        """Failed outcomes in registration order."""
        return [outcome for outcome in self.outcomes if outcome.is_failure]

    @property
    def failure_messages(self) -> list[str]:
        """Failure messages in registration order."""
        return [outcome.message or "" for outcome in self.failures]

    @property
    def failure_message(self) -> str:
        """Failure messages joined one per line. Empty when the gate passes."""
        return FAILURE_SEPARATOR.join(self.failure_messages)

    def task_names(self, status: TaskStatus | None = None) -> list[str]:
        """Get task names in order, optionally only those with a given status."""
        return [
            outcome.task_name
            for outcome in self.outcomes
            if status is None or outcome.status == status
        ]

    def get_outcome(self, task_name: str) -> TaskOutcome | None:
        """Get the outcome of a task by name."""
        for outcome in self.outcomes:
            if outcome.task_name == task_name:
                return outcome
        return None

    def raise_for_failures(self) -> None:
        """Raise GateFailedError carrying the combined message if any task failed.

        Raises:
            GateFailedError: If has_failures is True
        """
        if self.has_failures:
            raise GateFailedError(self.failure_messages)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "run_id": self.run_id,
            "has_failures": self.has_failures,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
            "total_execution_time": self.total_execution_time,
            "metadata": self.metadata,
        }
