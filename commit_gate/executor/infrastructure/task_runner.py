"""Sequential task runner."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from uuid6 import uuid7

from commit_gate.executor.domain.errors import FatalTaskError
from commit_gate.executor.domain.run_report import RunReport
from commit_gate.executor.domain.runner_port import RunnerPort
from commit_gate.executor.domain.task_outcome import TaskOutcome
from commit_gate.executor.domain.task_status import TaskStatus
from commit_gate.file_set.infrastructure.pattern_narrower import PatternNarrower

if TYPE_CHECKING:
    from commit_gate.file_set.domain.file_set import FileSet
    from commit_gate.file_set.domain.narrower_port import FileSetNarrowerPort
    from commit_gate.task_registry.domain.registry_port import RegistryPort
    from commit_gate.task_registry.domain.task_port import TaskPort

logger = logging.getLogger(__name__)


def classify_outcome(task: TaskPort, outcome: object, execution_time: float) -> TaskOutcome:
    """Check what a task returned and log it.

    Args:
        task: Task that produced the outcome
        outcome: Value returned by task.run()
        execution_time: Measured run time in seconds

    Returns:
        The outcome with its execution time filled in

    Raises:
        FatalTaskError: If the task broke its contract and returned something
            other than a TaskOutcome, or an outcome of another task
    """
    if not isinstance(outcome, TaskOutcome):
        raise FatalTaskError(
            f"Task '{task.name}' returned {type(outcome).__name__} instead of a TaskOutcome"
        )
    if outcome.task_name != task.name:
        raise FatalTaskError(
            f"Task '{task.name}' returned an outcome for task '{outcome.task_name}'"
        )

    outcome = outcome.with_execution_time(execution_time)

    if outcome.status == TaskStatus.FAILED:
        logger.warning("Task '%s' failed after %.2fs", task.name, execution_time)
    elif outcome.status == TaskStatus.SKIPPED:
        logger.info("Task '%s' skipped: %s", task.name, outcome.message)
    else:
        logger.info("Task '%s' passed in %.2fs", task.name, execution_time)

    return outcome


class TaskRunner(RunnerPort):
    """Runs registered tasks one after another in registration order.

    For every task the runner narrows the file set, invokes the task and
    records its outcome. A failed outcome never stops the following tasks.
    An exception raised by a task is not caught: it aborts the remaining tasks
    and reaches the caller unchanged.

    Example:
        ```python
        runner = TaskRunner(registry)
        report = runner.run(FileSet(["src/app.py"]))

        if report.has_failures:
            print(report.failure_message)
        ```
    """

    def __init__(
        self,
        registry: RegistryPort,
        narrower: FileSetNarrowerPort | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            registry: Registry providing the tasks in execution order
            narrower: File set narrower (default: PatternNarrower)
        """
        self.registry = registry
        self.narrower = narrower or PatternNarrower()

    def run(self, file_set: FileSet) -> RunReport:
        """Run all registered tasks against a file set.

        Args:
            file_set: Candidate paths for this run

        Returns:
            RunReport with one outcome per task, in registration order

        Raises:
            Exception: Any fatal error raised by a task, unchanged
        """
        run_id = str(uuid7())
        tasks = self.registry.list()
        logger.info("Starting run %s: %d task(s), %d file(s)", run_id, len(tasks), len(file_set))

        start_time = time.time()
        outcomes: list[TaskOutcome] = []

        for task in tasks:
            narrowed = self.narrower.narrow(file_set, task)
            logger.debug("Running task '%s' on %d file(s)", task.name, len(narrowed))

            task_start = time.time()
            outcome = task.run(narrowed)
            outcomes.append(classify_outcome(task, outcome, time.time() - task_start))

        report = RunReport(
            run_id=run_id,
            outcomes=outcomes,
            total_execution_time=time.time() - start_time,
            metadata={"runner": "sequential", "files": len(file_set)},
        )
        logger.info(
            "Run %s finished: %d failed, %d task(s) in %.2fs",
            run_id,
            len(report.failures),
            len(outcomes),
            report.total_execution_time,
        )
        return report
