"""Concrete verification tasks."""

from commit_gate.tasks.catalogue import BUILTIN_TASKS, TaskPreset, available_tasks, get_preset
from commit_gate.tasks.command_task import CommandTask

__all__ = ["CommandTask", "TaskPreset", "BUILTIN_TASKS", "available_tasks", "get_preset"]
