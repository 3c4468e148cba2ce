"""
Git-backed file set provider.
Lists staged or tracked files of a repository.
"""

import logging
import subprocess
from pathlib import Path

from commit_gate.executor.domain.errors import FatalTaskError
from commit_gate.file_set.domain.file_set import FileSet

logger = logging.getLogger(__name__)


class GitFileProvider:
    """
    Provides FileSets from a git working tree.

    Example:
        provider = GitFileProvider(".")
        files = provider.staged()
    """

    def __init__(self, git_dir: str | Path = ".", git_executable: str = "git") -> None:
        """
        Initialize the provider.

        Args:
            git_dir: Directory where git is initialized.
            git_executable: Name or path of the git binary.
        """
        self.git_dir = Path(git_dir)
        self.git_executable = git_executable

    def staged(self) -> FileSet:
        """
        Get the files added, copied, modified or renamed in the index.

        Returns:
            FileSet of staged paths, relative to the repository root.

        Raises:
            FatalTaskError: If git cannot be run or exits with an error.
        """
        return FileSet(
            self._git_paths("diff", "--cached", "--name-only", "-z", "--diff-filter=ACMR")
        )

    def tracked(self) -> FileSet:
        """
        Get every file tracked by git.

        Raises:
            FatalTaskError: If git cannot be run or exits with an error.
        """
        return FileSet(self._git_paths("ls-files", "-z"))

    def toplevel(self) -> Path:
        """Get the repository top-level directory."""
        lines = self._git("rev-parse", "--show-toplevel").splitlines()
        if not lines:
            raise FatalTaskError("git rev-parse returned no top-level directory")
        return Path(lines[0])

    def _git_paths(self, *args: str) -> list[str]:
        """Run a git command printing NUL-terminated paths and split them."""
        # -z keeps non-ASCII and newline characters in paths unquoted
        return [path for path in self._git(*args).split("\0") if path]

    def _git(self, *args: str) -> str:
        """Run a git command and return its output."""
        command = [self.git_executable, *args]
        logger.debug("Running %s in %s", " ".join(command), self.git_dir)
        try:
            completed = subprocess.run(
                command,
                cwd=self.git_dir,
                capture_output=True,
                encoding="utf-8",
                errors="surrogateescape",
                check=False,
            )
        except OSError as error:
            raise FatalTaskError(f"Unable to run git: {error}") from error

        if completed.returncode != 0:
            raise FatalTaskError(
                f"git {' '.join(args)} failed with exit code {completed.returncode}: "
                f"{completed.stderr.strip()}"
            )

        return completed.stdout
