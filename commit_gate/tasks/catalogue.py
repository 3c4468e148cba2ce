"""
Built-in task catalogue.
Command presets for well-known verification tools.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskPreset:
    """Defaults for a known verification tool."""

    command: tuple[str, ...]
    extensions: tuple[str, ...] = ()
    run_on_empty: bool = False
    pass_files: bool = True
    description: str = ""


BUILTIN_TASKS: dict[str, TaskPreset] = {
    "ruff": TaskPreset(
        command=("ruff", "check"),
        extensions=(".py", ".pyi"),
        description="Lint Python files with ruff",
    ),
    "pycodestyle": TaskPreset(
        command=("pycodestyle",),
        extensions=(".py",),
        description="Check Python files against PEP 8",
    ),
    "mypy": TaskPreset(
        command=("mypy",),
        extensions=(".py", ".pyi"),
        description="Type check Python files",
    ),
    "pytest": TaskPreset(
        command=("pytest", "-q"),
        run_on_empty=True,
        pass_files=False,
        description="Run the test suite",
    ),
}


def available_tasks() -> list[str]:
    """Get the names of the built-in tasks."""
    return list(BUILTIN_TASKS)


def get_preset(name: str) -> TaskPreset | None:
    """Get the preset of a built-in task, None for unknown names."""
    return BUILTIN_TASKS.get(name)
