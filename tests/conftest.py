"""Pytest configuration and shared fixtures."""

import time
from collections.abc import Callable, Generator

import pytest

from commit_gate.executor.domain.task_outcome import TaskOutcome
from commit_gate.file_set.domain.file_interest import FileInterest
from commit_gate.file_set.domain.file_set import FileSet
from commit_gate.task_registry import TaskPort, TaskRegistry, clear_registry


class StubTask(TaskPort):
    """Task double that records its calls and returns or raises a fixed result."""

    def __init__(
        self,
        name: str,
        calls: list[str],
        failure: str | None = None,
        error: Exception | None = None,
        interest: FileInterest | None = None,
        delay: float = 0.0,
    ) -> None:
        self._name = name
        self.calls = calls
        self.failure = failure
        self.error = error
        self._interest = interest or FileInterest.everything()
        self.delay = delay
        self.received: list[FileSet] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def interest(self) -> FileInterest:
        return self._interest

    def run(self, file_set: FileSet) -> TaskOutcome:
        self.calls.append(self.name)
        self.received.append(file_set)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.failure is not None:
            return TaskOutcome.failure(self.name, self.failure, files_checked=len(file_set))
        return TaskOutcome.success(self.name, files_checked=len(file_set))


@pytest.fixture
def calls() -> list[str]:
    """Shared, ordered log of task invocations."""
    return []


@pytest.fixture
def make_task(calls: list[str]) -> Callable[..., StubTask]:
    """Factory for stub tasks sharing the `calls` log."""

    def factory(name: str, **kwargs: object) -> StubTask:
        return StubTask(name, calls, **kwargs)  # type: ignore[arg-type]

    return factory


@pytest.fixture
def registry() -> TaskRegistry:
    """Create an empty task registry."""
    return TaskRegistry()


@pytest.fixture
def file_set() -> FileSet:
    """Return a mixed set of changed files."""
    return FileSet(["src/app.py", "src/util.py", "README.md", "docs/index.rst"])


@pytest.fixture(autouse=True)
def clean_global_registry() -> Generator[None, None, None]:
    """Clean the decorator registry before and after each test."""
    clear_registry()
    yield
    clear_registry()
