"""
Pattern-based file set narrower.
Applies a task's extensions and include/exclude globs.
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING

from commit_gate.file_set.domain.file_interest import FileInterest
from commit_gate.file_set.domain.file_set import FileSet
from commit_gate.file_set.domain.narrower_port import FileSetNarrowerPort

if TYPE_CHECKING:
    from commit_gate.task_registry.domain.task_port import TaskPort


def _matches_any(path: str, patterns: tuple[str, ...]) -> bool:
    """Check a path against glob patterns (`*` also crosses directories)."""
    return any(fnmatch.fnmatchcase(path, pattern) for pattern in patterns)


class PatternNarrower(FileSetNarrowerPort):
    """
    Narrows a file set using the task's declared FileInterest.

    A path is kept when it has one of the declared extensions (if any), matches
    one of the include globs (if any) and matches none of the exclude globs.

    Example:
        narrower = PatternNarrower()
        narrowed = narrower.narrow(FileSet(["a.py", "b.md"]), ruff_task)
    """

    def narrow(self, file_set: FileSet, task: TaskPort) -> FileSet:
        """
        Narrow a file set to the paths the task is interested in.

        Args:
            file_set: Candidate paths.
            task: Task declaring the interest.

        Returns:
            Narrowed FileSet (may be empty).
        """
        return self.apply(file_set, task.interest)

    @staticmethod
    def apply(file_set: FileSet, interest: FileInterest) -> FileSet:
        """Apply a FileInterest to a file set."""
        if interest.is_unrestricted():
            return file_set

        narrowed = file_set.with_extensions(interest.extensions)
        if interest.include:
            narrowed = narrowed.filter(lambda path: _matches_any(path, interest.include))
        if interest.exclude:
            narrowed = narrowed.filter(lambda path: not _matches_any(path, interest.exclude))
        return narrowed
