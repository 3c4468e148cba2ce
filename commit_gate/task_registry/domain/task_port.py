"""
Task interface.
Defines the contract every verification task implements.
"""

from abc import ABC, abstractmethod

from commit_gate.executor.domain.task_outcome import TaskOutcome
from commit_gate.file_set.domain.file_interest import FileInterest
from commit_gate.file_set.domain.file_set import FileSet


class TaskPort(ABC):
    """
    Interface for verification tasks (linters, style checkers, test suites).

    A task is identified by its name. It declares which files it cares about
    through `interest` and checks them in `run`.

    Contract for `run`:
        - no violations: return TaskOutcome.success(...)
        - violations found: return TaskOutcome.failure(..., message)
        - nothing to check and the task opts out: return TaskOutcome.skipped(...)
        - unable to execute at all: raise FatalTaskError (or any other exception)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique task name."""
        ...

    @property
    def interest(self) -> FileInterest:
        """Declared file interest. Defaults to every file."""
        return FileInterest.everything()

    @abstractmethod
    def run(self, file_set: FileSet) -> TaskOutcome:
        """
        Check the narrowed file set.

        Args:
            file_set: Paths relevant to this task (may be empty).

        Returns:
            Success, Failure or Skipped outcome.

        Raises:
            FatalTaskError: If the task cannot execute at all.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
