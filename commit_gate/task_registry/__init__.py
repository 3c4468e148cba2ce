"""
Task Registry System.

Provides the task contract, ordered task registration and function tasks.
"""

from commit_gate.task_registry.decorator import clear_registry, get_registry, task
from commit_gate.task_registry.domain import RegistryPort, TaskPort
from commit_gate.task_registry.infrastructure import FunctionTask, TaskRegistry

__all__ = [
    # Decorator
    "task",
    "get_registry",
    "clear_registry",
    # Domain
    "TaskPort",
    "RegistryPort",
    # Infrastructure
    "TaskRegistry",
    "FunctionTask",
]
