"""Builds command tasks and the task registry from a gate configuration."""

from pathlib import Path

from commit_gate.config.domain.errors import ConfigurationError
from commit_gate.config.domain.settings import GateConfig, TaskConfig
from commit_gate.file_set.domain.file_interest import FileInterest
from commit_gate.task_registry.infrastructure.task_registry import TaskRegistry
from commit_gate.tasks.catalogue import TaskPreset, available_tasks, get_preset
from commit_gate.tasks.command_task import CommandTask


def build_task(
    name: str,
    config: TaskConfig | None = None,
    bin_dir: str | Path | None = None,
    cwd: str | Path | None = None,
) -> CommandTask:
    """
    Build a command task from its name and configuration.

    Args:
        name: Task name, either a built-in task or a custom one with a command.
        config: Task configuration (default: preset values only).
        bin_dir: Directory searched for the executable before PATH.
        cwd: Working directory for the tool.

    Returns:
        Configured CommandTask.

    Raises:
        ConfigurationError: If the task is unknown and has no command.
    """
    config = config or TaskConfig()
    preset = get_preset(name)

    if preset is None:
        if config.command is None:
            known = ", ".join(available_tasks())
            raise ConfigurationError(
                f"Unknown task '{name}'. Use one of [{known}] or set a command for it."
            )
        preset = TaskPreset(command=tuple(config.command))

    extensions = config.extensions if config.extensions is not None else preset.extensions
    return CommandTask(
        name=name,
        command=list(config.command or preset.command),
        interest=FileInterest(
            extensions=tuple(extensions),
            include=tuple(config.include),
            exclude=tuple(config.exclude),
        ),
        args=config.args,
        run_on_empty=preset.run_on_empty if config.run_on_empty is None else config.run_on_empty,
        pass_files=preset.pass_files if config.pass_files is None else config.pass_files,
        timeout=config.timeout,
        bin_dir=bin_dir,
        cwd=cwd,
    )


def build_registry(
    config: GateConfig,
    registry: TaskRegistry | None = None,
    cwd: str | Path | None = None,
) -> TaskRegistry:
    """
    Register the configured tasks in configuration order.

    Args:
        config: Gate configuration.
        registry: Registry to add to (default: a new one). Tasks already
            registered under the same name are kept.
        cwd: Working directory for the tools.

    Returns:
        The registry holding the configured tasks.

    Raises:
        ConfigurationError: If a task name is unknown and has no command.
    """
    registry = registry if registry is not None else TaskRegistry()
    for name, task_config in config.tasks.items():
        registry.add(build_task(name, task_config, bin_dir=config.bin_dir, cwd=cwd))
    return registry
