"""Tests for the sequential TaskRunner."""

import itertools
from collections.abc import Callable

import pytest

from commit_gate.executor import (
    FatalTaskError,
    GateFailedError,
    MissingExecutableError,
    TaskOutcome,
    TaskRunner,
    TaskStatus,
)
from commit_gate.file_set import FileInterest, FileSet, FileSetNarrowerPort
from commit_gate.task_registry import FunctionTask, TaskPort, TaskRegistry


class TestTaskRunner:
    """Test suite for sequential run semantics."""

    def test_all_tasks_succeed(
        self, registry: TaskRegistry, make_task: Callable, file_set: FileSet, calls: list[str]
    ) -> None:
        """Test N succeeding tasks give N success outcomes in registration order."""
        for name in ("ruff", "mypy", "pytest"):
            registry.add(make_task(name))

        report = TaskRunner(registry).run(file_set)

        assert not report.has_failures
        assert report.task_names() == ["ruff", "mypy", "pytest"]
        assert all(o.status == TaskStatus.SUCCESS for o in report.outcomes)
        assert calls == ["ruff", "mypy", "pytest"]
        assert report.run_id
        assert report.metadata["runner"] == "sequential"

    def test_failure_does_not_stop_other_tasks(
        self, registry: TaskRegistry, make_task: Callable, file_set: FileSet, calls: list[str]
    ) -> None:
        """Test that T2 still runs after T1 fails, and messages keep registration order."""
        registry.add(make_task("t1", failure="A"))
        registry.add(make_task("t2"))
        registry.add(make_task("t3", failure="B"))

        report = TaskRunner(registry).run(file_set)

        assert calls == ["t1", "t2", "t3"]
        assert report.has_failures
        assert report.failure_message == "A\nB"
        assert [o.status for o in report.outcomes] == [
            TaskStatus.FAILED,
            TaskStatus.SUCCESS,
            TaskStatus.FAILED,
        ]

        with pytest.raises(GateFailedError, match="A\nB"):
            report.raise_for_failures()

    def test_fatal_error_aborts_remaining_tasks(
        self, registry: TaskRegistry, make_task: Callable, file_set: FileSet, calls: list[str]
    ) -> None:
        """Test that a fatal error propagates unchanged and later tasks never run."""
        error = MissingExecutableError("phpcs")
        registry.add(make_task("t1", failure="A"))
        registry.add(make_task("t2", error=error))
        registry.add(make_task("t3"))

        with pytest.raises(MissingExecutableError) as exc_info:
            TaskRunner(registry).run(file_set)

        assert exc_info.value is error
        assert calls == ["t1", "t2"]

    def test_unexpected_exception_is_not_wrapped(
        self, registry: TaskRegistry, make_task: Callable, file_set: FileSet
    ) -> None:
        """Test that arbitrary exceptions are not turned into failures."""
        registry.add(make_task("t1", error=PermissionError("denied")))

        with pytest.raises(PermissionError, match="denied"):
            TaskRunner(registry).run(file_set)

    def test_empty_registry_passes(self, registry: TaskRegistry, file_set: FileSet) -> None:
        """Test that no tasks means a vacuous pass."""
        report = TaskRunner(registry).run(file_set)

        assert not report.has_failures
        assert report.outcomes == []

    def test_each_task_receives_its_narrowed_view(
        self, registry: TaskRegistry, make_task: Callable, file_set: FileSet
    ) -> None:
        """Test that tasks are invoked with their narrowed file set."""
        python = make_task("python", interest=FileInterest(extensions=(".py",)))
        docs = make_task("docs", interest=FileInterest(extensions=(".md", ".rst")))
        registry.add(python).add(docs)

        report = TaskRunner(registry).run(file_set)

        assert python.received == [FileSet(["src/app.py", "src/util.py"])]
        assert docs.received == [FileSet(["README.md", "docs/index.rst"])]
        assert report.get_outcome("python").files_checked == 2  # type: ignore[union-attr]

    def test_task_with_empty_view_is_still_invoked(
        self, registry: TaskRegistry, make_task: Callable, file_set: FileSet, calls: list[str]
    ) -> None:
        """Test that the runner leaves the skip decision to the task."""
        stub = make_task("php", interest=FileInterest(extensions=(".php",)))
        skipping = FunctionTask("skipper", lambda files: None, FileInterest(extensions=(".php",)))
        registry.add(stub).add(skipping)

        report = TaskRunner(registry).run(file_set)

        assert calls == ["php"]
        assert stub.received == [FileSet()]
        assert report.get_outcome("skipper").status == TaskStatus.SKIPPED  # type: ignore[union-attr]
        assert not report.has_failures

    def test_custom_narrower_is_used(
        self, registry: TaskRegistry, make_task: Callable, file_set: FileSet
    ) -> None:
        """Test injecting a narrower."""

        class FirstFileNarrower(FileSetNarrowerPort):
            def narrow(self, file_set: FileSet, task: TaskPort) -> FileSet:
                return FileSet(file_set.paths[:1])

        stub = make_task("t1")
        registry.add(stub)

        TaskRunner(registry, narrower=FirstFileNarrower()).run(file_set)

        assert stub.received == [FileSet(["src/app.py"])]

    def test_contract_violation_is_fatal(self, registry: TaskRegistry, file_set: FileSet) -> None:
        """Test that a task returning something other than a TaskOutcome aborts the run."""

        class BrokenTask(TaskPort):
            @property
            def name(self) -> str:
                return "broken"

            def run(self, file_set: FileSet):  # type: ignore[no-untyped-def]
                return True

        registry.add(BrokenTask())

        with pytest.raises(FatalTaskError, match="instead of a TaskOutcome"):
            TaskRunner(registry).run(file_set)

    def test_outcome_of_another_task_is_fatal(
        self, registry: TaskRegistry, file_set: FileSet
    ) -> None:
        """Test that an outcome carrying a different task name aborts the run."""
        registry.add(FunctionTask("lint", lambda files: TaskOutcome.success("tests")))

        with pytest.raises(FatalTaskError, match="outcome for task 'tests'"):
            TaskRunner(registry).run(file_set)

    def test_reports_are_fresh_per_run(
        self, registry: TaskRegistry, make_task: Callable, file_set: FileSet
    ) -> None:
        """Test that each run builds its own report."""
        registry.add(make_task("t1", failure="A"))
        runner = TaskRunner(registry)

        first = runner.run(file_set)
        second = runner.run(file_set)

        assert first is not second
        assert first.run_id != second.run_id
        assert len(second.outcomes) == 1

    @pytest.mark.parametrize("order", list(itertools.permutations(["a", "b", "c"])))
    def test_permutations(
        self, order: tuple[str, ...], make_task: Callable, file_set: FileSet
    ) -> None:
        """Test order independence of success and order dependence of messages."""
        passing = TaskRegistry([make_task(name) for name in order])
        assert not TaskRunner(passing).run(file_set).has_failures

        failing = TaskRegistry([make_task(name, failure=name.upper()) for name in order])
        report = TaskRunner(failing).run(file_set)
        assert report.failure_message == "\n".join(name.upper() for name in order)
