"""
Runner interface.
Defines how registered tasks are executed against a file set.
"""

from abc import ABC, abstractmethod

from commit_gate.executor.domain.run_report import RunReport
from commit_gate.file_set.domain.file_set import FileSet


class RunnerPort(ABC):
    """
    Interface for gate runners.

    A runner executes every registered task against its narrowed view of the
    file set, aggregates recoverable failures and lets fatal errors propagate.
    """

    @abstractmethod
    def run(self, file_set: FileSet) -> RunReport:
        """
        Run all registered tasks.

        Args:
            file_set: Candidate paths for this run.

        Returns:
            RunReport with one outcome per task, in registration order.

        Raises:
            Exception: Any fatal error raised by a task, unchanged.
        """
        ...
