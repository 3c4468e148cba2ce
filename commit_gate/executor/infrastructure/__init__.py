"""Executor infrastructure: sequential and concurrent runners."""

from commit_gate.executor.infrastructure.concurrent_runner import ConcurrentTaskRunner
from commit_gate.executor.infrastructure.task_runner import TaskRunner, classify_outcome

__all__ = ["TaskRunner", "ConcurrentTaskRunner", "classify_outcome"]
