"""
Function task.
Adapts a plain Python callable to the task contract.
"""

import asyncio
import inspect
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from commit_gate.executor.domain.errors import TaskFailure
from commit_gate.executor.domain.task_outcome import TaskOutcome
from commit_gate.file_set.domain.file_interest import FileInterest
from commit_gate.file_set.domain.file_set import FileSet
from commit_gate.task_registry.domain.task_port import TaskPort


class FunctionTask(TaskPort):
    """
    Runs a sync or async callable as a verification task.

    The callable receives the narrowed FileSet. Returning normally means no
    violations, raising TaskFailure means violations were found. A returned
    TaskOutcome is passed through as is. Any other exception propagates as a
    fatal error.

    Example:
        def no_debug_prints(files: FileSet) -> None:
            offenders = [path for path in files if "print(" in Path(path).read_text()]
            if offenders:
                raise TaskFailure(f"print() calls left in: {', '.join(offenders)}")

        task = FunctionTask("no_prints", no_debug_prints, FileInterest(extensions=(".py",)))
    """

    def __init__(
        self,
        name: str,
        func: Callable[[FileSet], Any],
        interest: FileInterest | None = None,
        run_on_empty: bool = False,
        description: str | None = None,
    ) -> None:
        """
        Initialize a function task.

        Args:
            name: Unique task name.
            func: Callable taking the narrowed FileSet.
            interest: Declared file interest (default: every file).
            run_on_empty: Run even when the narrowed set is empty.
            description: Human-readable description.

        Raises:
            ValueError: If the name is empty or func is not callable.
        """
        if not name:
            raise ValueError("Task name cannot be empty")
        if not callable(func):
            raise ValueError(f"Task '{name}' func must be callable")

        self._name = name
        self.func = func
        self._interest = interest or FileInterest.everything()
        self.run_on_empty = run_on_empty
        self.description = description
        self.is_async = inspect.iscoroutinefunction(func)

    @property
    def name(self) -> str:
        return self._name

    @property
    def interest(self) -> FileInterest:
        return self._interest

    def run(self, file_set: FileSet) -> TaskOutcome:
        """
        Call the wrapped function with the narrowed file set.

        Args:
            file_set: Paths relevant to this task.

        Returns:
            Success, Failure or Skipped outcome.
        """
        if file_set.is_empty() and not self.run_on_empty:
            return TaskOutcome.skipped(self.name)

        try:
            if self.is_async:
                result = self._run_coroutine(file_set)
            else:
                result = self.func(file_set)
        except TaskFailure as failure:
            return TaskOutcome.failure(self.name, failure.message, files_checked=len(file_set))

        if isinstance(result, TaskOutcome):
            return result
        return TaskOutcome.success(self.name, files_checked=len(file_set))

    def _run_coroutine(self, file_set: FileSet) -> Any:
        """Run the async function to completion from synchronous code."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.func(file_set))

        # asyncio.run cannot nest, so use a fresh loop in a helper thread
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, self.func(file_set)).result()
