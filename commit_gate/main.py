import argparse
import importlib
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from commit_gate.config import (
    DEFAULT_CONFIG_FILE,
    ConfigurationError,
    ConfigureWizard,
    GateConfig,
    build_registry,
    load_config,
)
from commit_gate.executor.domain.errors import GateError
from commit_gate.executor.domain.run_report import RunReport
from commit_gate.executor.domain.runner_port import RunnerPort
from commit_gate.executor.domain.task_status import TaskStatus
from commit_gate.executor.infrastructure import ConcurrentTaskRunner, TaskRunner
from commit_gate.file_set.domain.file_set import FileSet
from commit_gate.file_set.infrastructure.git_file_provider import GitFileProvider
from commit_gate.task_registry import TaskRegistry, get_registry

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2

STATUS_LABELS = {
    TaskStatus.SUCCESS: "PASS",
    TaskStatus.FAILED: "FAIL",
    TaskStatus.SKIPPED: "SKIP",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commit-gate",
        description="Run the configured quality checks against changed files.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings")
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Run the gate")
    run.add_argument("paths", nargs="*", help="Files to check (default: staged files)")
    run.add_argument("--all", action="store_true", help="Check every file tracked by git")
    run.add_argument("--parallel", action="store_true", help="Run tasks concurrently")
    run.add_argument("--workers", type=int, default=None, help="Concurrent task limit")
    run.add_argument(
        "--plugin",
        action="append",
        default=[],
        metavar="MODULE",
        help="Import a module defining @task functions (repeatable)",
    )

    configure = subparsers.add_parser("configure", help="Create the configuration file")
    configure.add_argument(
        "-n",
        "--no-interaction",
        action="store_true",
        help="Do not ask any question, use the defaults",
    )

    subparsers.add_parser("list", help="List the configured tasks in execution order")
    return parser


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


def load_registry(
    config: GateConfig, plugins: Sequence[str] = (), cwd: Path | None = None
) -> TaskRegistry:
    """Build the registry: configured tasks first, then @task functions from plugins."""
    registry = build_registry(config, cwd=cwd)
    for module_name in plugins:
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            raise ConfigurationError(f"Unable to import plugin '{module_name}': {e}") from e
    for task in get_registry().list():
        registry.add(task)
    return registry


def collect_files(args: argparse.Namespace, config: GateConfig) -> tuple[FileSet, Path | None]:
    """Build the file set and the directory its paths are relative to.

    Explicit paths are relative to the current directory. Paths listed by git
    are relative to the repository top level, so the tools run there.
    """
    if args.paths:
        return FileSet(args.paths), None
    provider = GitFileProvider(config.git_dir)
    file_set = provider.tracked() if args.all else provider.staged()
    return file_set, provider.toplevel()


def create_runner(args: argparse.Namespace, config: GateConfig, registry: TaskRegistry) -> RunnerPort:
    if args.parallel or config.parallel:
        return ConcurrentTaskRunner(
            registry,
            max_workers=args.workers or config.max_workers,
            task_timeout=config.task_timeout,
        )
    return TaskRunner(registry)


def render_report(report: RunReport) -> str:
    lines = [
        f"{STATUS_LABELS[outcome.status]}  {outcome.task_name} "
        f"({outcome.files_checked} file(s), {outcome.execution_time:.2f}s)"
        for outcome in report.outcomes
    ]
    if report.has_failures:
        lines.extend(["", report.failure_message])
    elif not report.outcomes:
        lines.append("No tasks configured.")
    return "\n".join(lines)


def command_run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    file_set, cwd = collect_files(args, config)
    registry = load_registry(config, args.plugin, cwd=cwd)

    report = create_runner(args, config, registry).run(file_set)
    print(render_report(report))

    if report.has_failures:
        print("\ncommit-gate: checks failed, commit aborted.", file=sys.stderr)
        return EXIT_FAILED
    return EXIT_PASSED


def command_configure(args: argparse.Namespace) -> int:
    wizard = ConfigureWizard(args.config, interactive=not args.no_interaction)
    return wizard.execute()


def command_list(args: argparse.Namespace) -> int:
    registry = load_registry(load_config(args.config))
    for position, name in enumerate(registry.names(), start=1):
        print(f"{position}. {name}")
    return EXIT_PASSED


COMMANDS = {
    "run": command_run,
    "configure": command_configure,
    "list": command_list,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        return COMMANDS[args.command](args)
    except GateError as e:
        # Tool or configuration breakage, not a failed check
        logger.error(f"[{type(e).__name__}] {e}")
        return EXIT_ERROR
    except Exception as e:
        # A task that cannot run at all, whatever it raised
        logger.exception(f"[{type(e).__name__}] {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
