"""Domain layer for task registry."""

from commit_gate.task_registry.domain.registry_port import RegistryPort
from commit_gate.task_registry.domain.task_port import TaskPort

__all__ = ["TaskPort", "RegistryPort"]
