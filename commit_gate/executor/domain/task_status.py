"""Task outcome status enumeration."""

from enum import StrEnum, auto


class TaskStatus(StrEnum):
    """Represents how a task run ended.

    Attributes:
        SUCCESS: Task checked its files and found no violations
        FAILED: Task found violations (recoverable failure)
        SKIPPED: Task had nothing to check and chose not to run
    """

    SUCCESS = auto()
    FAILED = auto()
    SKIPPED = auto()

    def is_failure(self) -> bool:
        """Check if this status counts against the gate.

        Returns:
            True only if status is FAILED
        """
        return self == TaskStatus.FAILED

    def is_successful(self) -> bool:
        """Check if this status lets the gate pass.

        Returns:
            True if status is SUCCESS or SKIPPED
        """
        return self in (TaskStatus.SUCCESS, TaskStatus.SKIPPED)
