"""
Task registry interface.
Defines how tasks are registered and listed for execution.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from commit_gate.task_registry.domain.task_port import TaskPort


class RegistryPort(ABC):
    """
    Interface for task registry.
    Keeps tasks in registration order, which is also the execution order.
    """

    @abstractmethod
    def add(self, task: TaskPort) -> RegistryPort:
        """
        Register a task.

        Adding a task whose name is already registered is a no-op.

        Args:
            task: Task to register.

        Returns:
            The registry itself, for chaining.
        """
        ...

    @abstractmethod
    def list(self) -> list[TaskPort]:
        """
        Get all registered tasks in registration order.

        Returns:
            New list of tasks. Mutating it does not change the registry.
        """
        ...

    @abstractmethod
    def get(self, name: str) -> TaskPort | None:
        """
        Get a task by name.

        Args:
            name: Task name.

        Returns:
            The task if found, None otherwise.
        """
        ...
