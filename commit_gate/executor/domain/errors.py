"""
Gate error hierarchy.

Two disjoint kinds of task trouble exist:

- TaskFailure: the inspected content has violations. Function tasks raise it,
  the task boundary turns it into a Failure outcome, and the runner aggregates it.
- FatalTaskError: the verification machinery itself broke. The runner never
  catches it, so it aborts the run immediately.
"""


class GateError(Exception):
    """Base class for all commit-gate errors."""


class TaskFailure(GateError):
    """Recoverable failure: a task found violations in the files it checked."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FatalTaskError(GateError):
    """A task could not execute at all (missing tool, I/O error, bad setup)."""


class MissingExecutableError(FatalTaskError):
    """The executable a task needs cannot be found."""

    def __init__(self, executable: str, searched: list[str] | None = None) -> None:
        self.executable = executable
        self.searched = searched or []
        locations = f" (searched: {', '.join(self.searched)})" if self.searched else ""
        super().__init__(f"Executable '{executable}' could not be found{locations}")


class TaskTimeoutError(FatalTaskError):
    """A task exceeded its timeout limit."""

    def __init__(self, task_name: str, timeout: float) -> None:
        self.task_name = task_name
        self.timeout = timeout
        super().__init__(f"Task '{task_name}' exceeded its timeout of {timeout:g}s")


class GateFailedError(GateError):
    """
    Aggregate of every recoverable failure of a run.

    The message holds one failing task message per line, in registration order.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))
