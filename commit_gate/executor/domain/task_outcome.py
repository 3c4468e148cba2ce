"""Task outcome model."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from commit_gate.executor.domain.task_status import TaskStatus


@dataclass
class TaskOutcome:
    """Represents the result of running one task against its narrowed file set.

    This is the tagged value a task hands back to the runner: Success,
    Failure(message) or Skipped(reason). Fatal errors are never represented
    here; they are raised instead.

    Attributes:
        task_name: Name of the task that produced this outcome
        status: SUCCESS, FAILED or SKIPPED
        message: Failure message (FAILED) or skip reason (SKIPPED), None on success
        files_checked: Number of files in the narrowed file set
        execution_time: Time taken by the task in seconds
        metadata: Additional task-specific data (exit code, command line, ...)
    """

    task_name: str
    status: TaskStatus
    message: str | None = None
    files_checked: int = 0
    execution_time: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the task outcome."""
        if not self.task_name:
            raise ValueError("task_name must not be empty")
        if self.files_checked < 0:
            raise ValueError("files_checked must be non-negative")
        if self.execution_time < 0:
            raise ValueError("execution_time must be non-negative")
        if self.status == TaskStatus.FAILED and not self.message:
            raise ValueError("message must be set for failed outcomes")

    @property
    def is_failure(self) -> bool:
        """Check if this outcome is a recoverable failure."""
        return self.status.is_failure()

    def with_execution_time(self, execution_time: float) -> TaskOutcome:
        """Return a copy with the measured execution time."""
        return replace(self, execution_time=execution_time)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation.

        Returns:
            Dictionary containing all outcome information
        """
        return {
            "task_name": self.task_name,
            "status": self.status.name,
            "message": self.message,
            "files_checked": self.files_checked,
            "execution_time": self.execution_time,
            "metadata": self.metadata,
        }

    @classmethod
    def success(
        cls,
        task_name: str,
        files_checked: int = 0,
        metadata: dict[str, Any] | None = None,
    ) -> TaskOutcome:
        """Create a successful outcome.

        Args:
            task_name: Task name
            files_checked: Number of files the task looked at
            metadata: Additional metadata

        Returns:
            TaskOutcome with SUCCESS status
        """
        return cls(
            task_name=task_name,
            status=TaskStatus.SUCCESS,
            files_checked=files_checked,
            metadata=metadata or {},
        )

    @classmethod
    def failure(
        cls,
        task_name: str,
        message: str,
        files_checked: int = 0,
        metadata: dict[str, Any] | None = None,
    ) -> TaskOutcome:
        """Create a failed outcome.

        Args:
            task_name: Task name
            message: Human-readable description of the violations found
            files_checked: Number of files the task looked at
            metadata: Additional metadata

        Returns:
            TaskOutcome with FAILED status
        """
        return cls(
            task_name=task_name,
            status=TaskStatus.FAILED,
            message=message,
            files_checked=files_checked,
            metadata=metadata or {},
        )

    @classmethod
    def skipped(
        cls,
        task_name: str,
        reason: str = "no files to check",
        metadata: dict[str, Any] | None = None,
    ) -> TaskOutcome:
        """Create a skipped outcome.

        Args:
            task_name: Task name
            reason: Why the task did not run
            metadata: Additional metadata

        Returns:
            TaskOutcome with SKIPPED status
        """
        return cls(
            task_name=task_name,
            status=TaskStatus.SKIPPED,
            message=reason,
            metadata=metadata or {},
        )
