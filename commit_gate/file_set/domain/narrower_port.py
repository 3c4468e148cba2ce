"""
File set narrower interface.
Defines how a file set is reduced to the paths one task cares about.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from commit_gate.file_set.domain.file_set import FileSet

if TYPE_CHECKING:
    from commit_gate.task_registry.domain.task_port import TaskPort


class FileSetNarrowerPort(ABC):
    """
    Interface for narrowing a file set per task.

    Implementations must be pure: no side effects, and identical inputs always
    give equal results.
    """

    @abstractmethod
    def narrow(self, file_set: FileSet, task: TaskPort) -> FileSet:
        """
        Narrow a file set to the paths relevant for a task.

        Args:
            file_set: Candidate paths for the whole run.
            task: Task whose declared interest is applied.

        Returns:
            Possibly empty FileSet, ordered like the input.
        """
        ...
