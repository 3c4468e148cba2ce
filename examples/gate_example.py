"""
Commit Gate Example

This example demonstrates how to:
1. Register function tasks using the @task decorator
2. Combine them with a built-in command task
3. Run the gate sequentially and concurrently
4. Read the run report

It can also be loaded as a plugin:
    python -m commit_gate.main run --plugin examples.gate_example src/app.py
"""

import asyncio

from commit_gate.config import build_task
from commit_gate.executor import ConcurrentTaskRunner, FatalTaskError, TaskFailure, TaskRunner
from commit_gate.file_set import FileSet
from commit_gate.task_registry import TaskRegistry, get_registry, task


@task(name="no_debug_prints", extensions=[".py"])
def no_debug_prints(file_set: FileSet) -> None:
    """Reject Python files that still contain breakpoint() calls."""
    offenders = []
    for path in file_set:
        try:
            with open(path, encoding="utf-8") as f:
                if "breakpoint()" in f.read():
                    offenders.append(path)
        except FileNotFoundError:
            continue
    if offenders:
        raise TaskFailure(f"breakpoint() left in: {', '.join(offenders)}")


@task(name="no_large_changes", exclude=["*.lock"])
def no_large_changes(file_set: FileSet) -> None:
    """Fail when a single commit touches too many files."""
    if len(file_set) > 50:
        raise TaskFailure(f"{len(file_set)} files changed, split the commit")


@task(name="docs_spellcheck", extensions=[".md", ".rst"])
async def docs_spellcheck(file_set: FileSet) -> None:
    """Pretend to check documentation spelling (async example)."""
    await asyncio.sleep(0.1)


def main() -> None:
    """Main execution function."""
    print("=" * 60)
    print("Commit Gate Example")
    print("=" * 60)

    file_set = FileSet(["src/app.py", "src/util.py", "README.md", "poetry.lock"])

    # Function tasks first, then a built-in tool
    registry = TaskRegistry(get_registry().list())
    registry.add(build_task("ruff"))

    print("\n1. Registered Tasks:")
    for position, name in enumerate(registry.names(), start=1):
        print(f"   {position}. {name}")

    print("\n2. Sequential Run:")
    try:
        report = TaskRunner(registry).run(file_set)
    except FatalTaskError as e:
        # ruff may not be installed here
        print(f"   Gate aborted: {e}")
        registry = TaskRegistry(get_registry().list())
        report = TaskRunner(registry).run(file_set)

    for outcome in report.outcomes:
        print(f"   - {outcome.task_name}: {outcome.status.name} ({outcome.files_checked} file(s))")

    print("\n3. Concurrent Run:")
    report = ConcurrentTaskRunner(registry, max_workers=2).run(file_set)
    print(f"   Successful: {report.is_successful}")
    print(f"   Order kept: {[outcome.task_name for outcome in report.outcomes]}")
    if report.has_failures:
        print(f"   Failures:\n{report.failure_message}")

    print("\n" + "=" * 60)
    print("Example completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
