"""Executor module for running gate tasks and aggregating their outcomes."""

from commit_gate.executor.domain import (
    FatalTaskError,
    GateError,
    GateFailedError,
    MissingExecutableError,
    RunnerPort,
    RunReport,
    TaskFailure,
    TaskOutcome,
    TaskStatus,
    TaskTimeoutError,
)
from commit_gate.executor.infrastructure import ConcurrentTaskRunner, TaskRunner

__all__ = [
    "GateError",
    "TaskFailure",
    "FatalTaskError",
    "MissingExecutableError",
    "TaskTimeoutError",
    "GateFailedError",
    "RunReport",
    "RunnerPort",
    "TaskOutcome",
    "TaskStatus",
    "TaskRunner",
    "ConcurrentTaskRunner",
]
