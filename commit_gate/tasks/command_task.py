"""
Command task.
Runs an external verification tool against the narrowed file set.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from commit_gate.executor.domain.errors import (
    FatalTaskError,
    MissingExecutableError,
    TaskTimeoutError,
)
from commit_gate.executor.domain.task_outcome import TaskOutcome
from commit_gate.file_set.domain.file_interest import FileInterest
from commit_gate.file_set.domain.file_set import FileSet
from commit_gate.task_registry.domain.task_port import TaskPort

logger = logging.getLogger(__name__)

OUTPUT_TAIL_CHARS = 8000


def tail(text: str, n: int = OUTPUT_TAIL_CHARS) -> str:
    if len(text) <= n:
        return text
    return text[-n:]


class CommandTask(TaskPort):
    """
    Runs a command line tool and maps its exit status to an outcome.

    Exit code 0 is a success, any other exit code is a recoverable failure whose
    message is the tool output. A tool that cannot be started, or that exceeds
    its timeout, is a fatal error.

    Example:
        task = CommandTask(
            name="ruff",
            command=["ruff", "check"],
            interest=FileInterest(extensions=(".py",)),
            bin_dir=".venv/bin",
        )
        outcome = task.run(FileSet(["src/app.py"]))
    """

    def __init__(
        self,
        name: str,
        command: list[str],
        interest: FileInterest | None = None,
        args: list[str] | None = None,
        run_on_empty: bool = False,
        pass_files: bool = True,
        timeout: float | None = None,
        bin_dir: str | Path | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        """
        Initialize a command task.

        Args:
            name: Unique task name.
            command: Executable followed by its fixed arguments.
            interest: Declared file interest (default: every file).
            args: Extra arguments appended after the command.
            run_on_empty: Run even when no file matches (test suites).
            pass_files: Append the narrowed paths to the command line.
            timeout: Timeout in seconds (None for no timeout).
            bin_dir: Directory searched for the executable before PATH.
            cwd: Working directory for the tool (default: current directory).

        Raises:
            ValueError: If name or command is empty, or timeout is not positive.
        """
        if not name:
            raise ValueError("Task name cannot be empty")
        if not command:
            raise ValueError(f"Task '{name}' command cannot be empty")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"Task '{name}' timeout must be positive")

        self._name = name
        self.command = list(command)
        self._interest = interest or FileInterest.everything()
        self.args = list(args or [])
        self.run_on_empty = run_on_empty
        self.pass_files = pass_files
        self.timeout = timeout
        self.bin_dir = Path(bin_dir) if bin_dir else None
        self.cwd = Path(cwd) if cwd else None

    @property
    def name(self) -> str:
        return self._name

    @property
    def interest(self) -> FileInterest:
        return self._interest

    def resolve_executable(self) -> str:
        """
        Find the executable, looking in bin_dir first and then on PATH.

        Returns:
            Path of the executable.

        Raises:
            MissingExecutableError: If the executable cannot be found.
        """
        executable = self.command[0]
        searched: list[str] = []

        if self.bin_dir is not None:
            candidate = self.bin_dir / executable
            searched.append(str(self.bin_dir))
            if candidate.is_file() and os.access(candidate, os.X_OK):
                return str(candidate)

        found = shutil.which(executable)
        searched.append("PATH")
        if found is None:
            raise MissingExecutableError(executable, searched)
        return found

    def build_command(self, file_set: FileSet) -> list[str]:
        """Build the full command line for a file set."""
        command = [self.resolve_executable(), *self.command[1:], *self.args]
        if self.pass_files:
            command.extend(file_set)
        return command

    def run(self, file_set: FileSet) -> TaskOutcome:
        """
        Run the tool on the narrowed file set.

        Args:
            file_set: Paths relevant to this task.

        Returns:
            Success, Failure or Skipped outcome.

        Raises:
            MissingExecutableError: If the tool is not installed.
            TaskTimeoutError: If the tool exceeds its timeout.
            FatalTaskError: If the tool cannot be started.
        """
        if file_set.is_empty() and not self.run_on_empty:
            return TaskOutcome.skipped(self.name)

        command = self.build_command(file_set)
        logger.debug("Task '%s' running: %s", self.name, " ".join(command))

        try:
            completed = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as error:
            raise TaskTimeoutError(self.name, self.timeout or 0) from error
        except OSError as error:
            raise FatalTaskError(f"Task '{self.name}' could not start {command[0]}: {error}") from error

        metadata = {"returncode": completed.returncode, "command": command}
        if completed.returncode == 0:
            return TaskOutcome.success(self.name, files_checked=len(file_set), metadata=metadata)

        output = "\n".join(
            part.strip() for part in (completed.stdout, completed.stderr) if part.strip()
        )
        message = f"[{self.name}] exited with code {completed.returncode}"
        if output:
            message = f"{message}\n{tail(output)}"
        return TaskOutcome.failure(
            self.name, message, files_checked=len(file_set), metadata=metadata
        )
