"""
Immutable collection of candidate file paths.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import PurePath


def _normalize(path: str | os.PathLike[str]) -> str:
    """Return a POSIX-style string for a path."""
    return PurePath(path).as_posix()


@dataclass(frozen=True, init=False)
class FileSet:
    """
    Ordered, deduplicated set of file paths for one gate run.

    The first occurrence of a path fixes its position. Instances never change
    after construction; every query returns a new FileSet.

    Example:
        files = FileSet(["src/app.py", "README.md", "src/app.py"])
        python_files = files.with_extensions([".py"])
        assert python_files.paths == ("src/app.py",)
    """

    paths: tuple[str, ...] = field(default=())

    def __init__(self, paths: Iterable[str | os.PathLike[str]] = ()) -> None:
        """
        Build a file set.

        Args:
            paths: Candidate paths. Duplicates are dropped, order is kept.
        """
        normalized = (_normalize(path) for path in paths)
        object.__setattr__(self, "paths", tuple(dict.fromkeys(normalized)))

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, path: object) -> bool:
        if isinstance(path, (str, os.PathLike)):
            return _normalize(path) in self.paths
        return False

    def __bool__(self) -> bool:
        return bool(self.paths)

    def is_empty(self) -> bool:
        """Check whether the set holds no paths."""
        return not self.paths

    def filter(self, predicate: Callable[[str], bool]) -> FileSet:
        """
        Keep the paths accepted by a predicate.

        Args:
            predicate: Called with each path.

        Returns:
            New FileSet in the same order.
        """
        return FileSet(path for path in self.paths if predicate(path))

    def with_extensions(self, extensions: Iterable[str]) -> FileSet:
        """
        Keep the paths ending with one of the given extensions.

        Extensions are compared case-insensitively and may be given with or
        without the leading dot.
        """
        suffixes = tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions
        )
        if not suffixes:
            return self
        return self.filter(lambda path: path.lower().endswith(suffixes))

    def to_list(self) -> list[str]:
        """Return the paths as a new list."""
        return list(self.paths)
