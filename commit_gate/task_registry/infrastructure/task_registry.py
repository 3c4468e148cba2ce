"""
Task registry implementation.
Stores tasks in registration order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from commit_gate.task_registry.domain.registry_port import RegistryPort
from commit_gate.task_registry.domain.task_port import TaskPort


class TaskRegistry(RegistryPort):
    """
    In-memory, ordered task registry.

    Task identity is the task name: registering a second task with a name that
    is already present is silently ignored, even if it is a different object.

    Example:
        registry = TaskRegistry()
        registry.add(ruff_task).add(pytest_task)
        registry.add(ruff_task)  # no-op

        for task in registry.list():
            print(task.name)
    """

    def __init__(self, tasks: list[TaskPort] | None = None) -> None:
        """
        Initialize the registry.

        Args:
            tasks: Optional tasks to register, in order.
        """
        self._tasks: list[TaskPort] = []
        self._names: set[str] = set()
        for task in tasks or []:
            self.add(task)

    def add(self, task: TaskPort) -> TaskRegistry:
        """
        Register a task unless a task with the same name exists.

        Args:
            task: Task to register.

        Returns:
            The registry itself.
        """
        if task.name in self._names:
            logging.debug(f"Task '{task.name}' is already registered, ignoring")
            return self

        self._tasks.append(task)
        self._names.add(task.name)

        logging.info(f"Registered task '{task.name}' (position: {len(self._tasks)})")
        return self

    def get(self, name: str) -> TaskPort | None:
        """
        Get a task by name.

        Args:
            name: Task name.

        Returns:
            The task if found, None otherwise.
        """
        for task in self._tasks:
            if task.name == name:
                return task
        return None

    def names(self) -> list[str]:
        """Get task names in registration order."""
        return [task.name for task in self._tasks]

    def get_stats(self) -> dict[str, Any]:
        """
        Get registry statistics.

        Returns:
            Dictionary with statistics.
        """
        kinds: dict[str, int] = {}
        for task in self._tasks:
            kind = type(task).__name__
            kinds[kind] = kinds.get(kind, 0) + 1
        return {"total_tasks": len(self._tasks), "task_kinds": kinds}

    def clear(self) -> None:
        """Remove all registered tasks."""
        self._tasks.clear()
        self._names.clear()
        logging.info("Cleared all tasks from registry")

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[TaskPort]:
        return iter(self.list())

    def list(self) -> list[TaskPort]:
        """
        Get all registered tasks in registration order.

        Returns:
            Copy of the ordered task list.
        """
        return self._tasks.copy()
