"""Executor domain models."""

from commit_gate.executor.domain.errors import (
    FatalTaskError,
    GateError,
    GateFailedError,
    MissingExecutableError,
    TaskFailure,
    TaskTimeoutError,
)
from commit_gate.executor.domain.run_report import FAILURE_SEPARATOR, RunReport
from commit_gate.executor.domain.runner_port import RunnerPort
from commit_gate.executor.domain.task_outcome import TaskOutcome
from commit_gate.executor.domain.task_status import TaskStatus

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
    "FAILURE_SEPARATOR",
]
