"""Tests for the git file provider."""

import shutil
import subprocess
from pathlib import Path
from typing import Any

import pytest

from commit_gate.executor import FatalTaskError
from commit_gate.file_set import GitFileProvider


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> Any:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestGitFileProvider:
    """Test git-backed file listing."""

    def test_staged_files(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test listing staged files."""
        seen: list[list[str]] = []

        def fake_run(command: list[str], **kwargs: Any) -> Any:
            seen.append(command)
            assert kwargs["cwd"] == tmp_path
            return _completed("src/app.py\0README.md\0")

        monkeypatch.setattr(subprocess, "run", fake_run)

        files = GitFileProvider(tmp_path).staged()

        assert files.paths == ("src/app.py", "README.md")
        assert seen == [["git", "diff", "--cached", "--name-only", "-z", "--diff-filter=ACMR"]]

    def test_tracked_files(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test listing tracked files."""
        monkeypatch.setattr(subprocess, "run", lambda command, **kwargs: _completed("a.py\0b.py\0"))

        assert GitFileProvider().tracked().paths == ("a.py", "b.py")

    def test_toplevel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test resolving the repository top level."""
        monkeypatch.setattr(subprocess, "run", lambda command, **kwargs: _completed("/repo\n"))

        assert GitFileProvider().toplevel() == Path("/repo")

    def test_git_error_is_fatal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a failing git command raises FatalTaskError."""
        monkeypatch.setattr(
            subprocess,
            "run",
            lambda command, **kwargs: _completed(returncode=128, stderr="not a git repository"),
        )

        with pytest.raises(FatalTaskError, match="not a git repository"):
            GitFileProvider().staged()

    def test_missing_git_is_fatal(self, tmp_path: Path) -> None:
        """Test that a missing git binary raises FatalTaskError."""
        provider = GitFileProvider(tmp_path, git_executable=str(tmp_path / "no-such-git"))

        with pytest.raises(FatalTaskError, match="Unable to run git"):
            provider.staged()

    @pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
    def test_unusual_file_names(self, tmp_path: Path) -> None:
        """Test that non-ASCII and newline characters survive in staged and tracked paths."""
        subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
        names = ["café.py", "two\nlines.py", "plain.py"]
        for name in names:
            (tmp_path / name).write_text("x = 1\n", encoding="utf-8")
        subprocess.run(["git", "add", "--", *names], cwd=tmp_path, check=True)

        provider = GitFileProvider(tmp_path)

        assert set(provider.staged()) == set(names)
        assert set(provider.tracked()) == set(names)
        assert all((tmp_path / path).is_file() for path in provider.staged())
