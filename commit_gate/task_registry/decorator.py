"""
Task decorator.
Decorates functions to register them as gate tasks.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from commit_gate.file_set.domain.file_interest import FileInterest
from commit_gate.task_registry.infrastructure.function_task import FunctionTask
from commit_gate.task_registry.infrastructure.task_registry import TaskRegistry

F = TypeVar("F", bound=Callable[..., Any])

# Global registry instance
_global_registry = TaskRegistry()


def task(
    name: str | None = None,
    *,
    extensions: list[str] | None = None,
    include: list[str] | None = None,
    exclude: list[str] | None = None,
    run_on_empty: bool = False,
    description: str | None = None,
) -> Callable[[F], F]:
    """
    Decorator to register a function as a gate task.

    The function receives the narrowed FileSet. Raise TaskFailure to report
    violations; any other exception aborts the run.

    Args:
        name: Task name (defaults to function name).
        extensions: File extensions the task checks.
        include: Glob patterns a path must match.
        exclude: Glob patterns that drop a path.
        run_on_empty: Run even when no file matches (default: False).
        description: Human-readable description (defaults to docstring).

    Returns:
        Decorated function (unchanged).

    Example:
        @task(extensions=[".py"])
        def no_breakpoints(files: FileSet) -> None:
            offenders = [p for p in files if "breakpoint()" in Path(p).read_text()]
            if offenders:
                raise TaskFailure("breakpoint() left in " + ", ".join(offenders))
    """

    def decorator(func: F) -> F:
        interest = FileInterest(
            extensions=tuple(extensions or ()),
            include=tuple(include or ()),
            exclude=tuple(exclude or ()),
        )

        _global_registry.add(
            FunctionTask(
                name=name or func.__name__,
                func=func,
                interest=interest,
                run_on_empty=run_on_empty,
                description=description or func.__doc__,
            )
        )

        # Return original function unchanged
        return func

    return decorator


def get_registry() -> TaskRegistry:
    """
    Get the global task registry.

    Returns:
        The global TaskRegistry instance.
    """
    return _global_registry


def clear_registry() -> None:
    """Clear the global registry (useful for testing)."""
    _global_registry.clear()
