"""Concurrent task runner built on asyncio and a thread pool."""

from __future__ import annotations

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from uuid6 import uuid7

from commit_gate.executor.domain.errors import TaskTimeoutError
from commit_gate.executor.domain.run_report import RunReport
from commit_gate.executor.domain.runner_port import RunnerPort
from commit_gate.executor.domain.task_outcome import TaskOutcome
from commit_gate.executor.infrastructure.task_runner import classify_outcome
from commit_gate.file_set.infrastructure.pattern_narrower import PatternNarrower

if TYPE_CHECKING:
    from commit_gate.file_set.domain.file_set import FileSet
    from commit_gate.file_set.domain.narrower_port import FileSetNarrowerPort
    from commit_gate.task_registry.domain.registry_port import RegistryPort
    from commit_gate.task_registry.domain.task_port import TaskPort

logger = logging.getLogger(__name__)


class ConcurrentTaskRunner(RunnerPort):
    """Runs registered tasks in parallel worker threads.

    Tasks are independent, so they may finish in any order; the report still
    lists outcomes in registration order. The first fatal error cancels every
    task that has not started yet and is re-raised unchanged. Tasks already
    running in a worker thread cannot be interrupted; their results are dropped.

    A per-task timeout can be set. Exceeding it raises TaskTimeoutError, which
    is fatal like any other broken-tool error.

    Example:
        ```python
        runner = ConcurrentTaskRunner(registry, max_workers=4, task_timeout=120)
        report = runner.run(file_set)
        ```
    """

    def __init__(
        self,
        registry: RegistryPort,
        narrower: FileSetNarrowerPort | None = None,
        max_workers: int = 4,
        task_timeout: float | None = None,
    ) -> None:
        """Initialize the concurrent runner.

        Args:
            registry: Registry providing the tasks in registration order
            narrower: File set narrower (default: PatternNarrower)
            max_workers: Maximum number of tasks running at once (default: 4)
            task_timeout: Per-task timeout in seconds (None for no timeout)

        Raises:
            ValueError: If max_workers < 1 or task_timeout is not positive
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if task_timeout is not None and task_timeout <= 0:
            raise ValueError("task_timeout must be positive")

        self.registry = registry
        self.narrower = narrower or PatternNarrower()
        self.max_workers = max_workers
        self.task_timeout = task_timeout

    def run(self, file_set: FileSet) -> RunReport:
        """Run all registered tasks synchronously.

        This is a synchronous wrapper around run_async() for convenience.

        Args:
            file_set: Candidate paths for this run

        Returns:
            RunReport with outcomes in registration order
        """
        return asyncio.run(self.run_async(file_set))

    async def run_async(self, file_set: FileSet) -> RunReport:
        """Run all registered tasks concurrently.

        Args:
            file_set: Candidate paths for this run

        Returns:
            RunReport with outcomes in registration order

        Raises:
            Exception: The first fatal error raised by a task, unchanged
        """
        run_id = str(uuid7())
        tasks = self.registry.list()
        logger.info(
            "Starting concurrent run %s: %d task(s), %d file(s), %d worker(s)",
            run_id,
            len(tasks),
            len(file_set),
            self.max_workers,
        )

        start_time = time.time()
        semaphore = asyncio.Semaphore(self.max_workers)
        aborted = asyncio.Event()
        outcomes: dict[int, TaskOutcome] = {}

        # Shut down without joining so running threads never delay a fatal error
        pool = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="commit-gate")
        positions: dict[asyncio.Task[TaskOutcome], int] = {}
        pending: set[asyncio.Task[TaskOutcome]] = set()

        try:
            for position, task in enumerate(tasks):
                narrowed = self.narrower.narrow(file_set, task)
                job = asyncio.create_task(
                    self._run_task(task, narrowed, semaphore, pool, aborted),
                    name=f"commit-gate:{task.name}",
                )
                positions[job] = position
                pending.add(job)

            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_EXCEPTION)
                # Lowest registration position wins when several fail at once
                for job in sorted(done, key=positions.__getitem__):
                    if not job.cancelled():
                        outcomes[positions[job]] = job.result()
        finally:
            for job in pending:
                job.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            for job in positions:
                if job.done() and not job.cancelled():
                    job.exception()
            pool.shutdown(wait=False, cancel_futures=True)

        report = RunReport(
            run_id=run_id,
            outcomes=[outcomes[position] for position in sorted(outcomes)],
            total_execution_time=time.time() - start_time,
            metadata={
                "runner": "concurrent",
                "files": len(file_set),
                "max_workers": self.max_workers,
            },
        )
        logger.info(
            "Run %s finished: %d failed, %d task(s) in %.2fs",
            run_id,
            len(report.failures),
            len(report.outcomes),
            report.total_execution_time,
        )
        return report

    async def _run_task(
        self,
        task: TaskPort,
        narrowed: FileSet,
        semaphore: asyncio.Semaphore,
        pool: ThreadPoolExecutor,
        aborted: asyncio.Event,
    ) -> TaskOutcome:
        """Run one task in the pool once a worker slot is free."""
        async with semaphore:
            # A slot freed by a fatal error must not start another task
            if aborted.is_set():
                raise asyncio.CancelledError

            logger.debug("Running task '%s' on %d file(s)", task.name, len(narrowed))
            loop = asyncio.get_running_loop()
            task_start = time.time()
            try:
                future = loop.run_in_executor(pool, task.run, narrowed)
                if self.task_timeout is None:
                    outcome = await future
                else:
                    try:
                        outcome = await asyncio.wait_for(future, timeout=self.task_timeout)
                    except TimeoutError as error:
                        raise TaskTimeoutError(task.name, self.task_timeout) from error

                return classify_outcome(task, outcome, time.time() - task_start)
            except Exception:
                aborted.set()
                raise
