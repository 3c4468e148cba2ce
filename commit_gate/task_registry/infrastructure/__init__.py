"""Infrastructure layer for task registry."""

from commit_gate.task_registry.infrastructure.function_task import FunctionTask
from commit_gate.task_registry.infrastructure.task_registry import TaskRegistry

__all__ = ["TaskRegistry", "FunctionTask"]
