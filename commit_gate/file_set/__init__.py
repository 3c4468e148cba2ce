"""File set model, narrowing and providers."""

from commit_gate.file_set.domain import FileInterest, FileSet, FileSetNarrowerPort
from commit_gate.file_set.infrastructure import GitFileProvider, PatternNarrower

__all__ = [
    # Domain
    "FileSet",
    "FileInterest",
    "FileSetNarrowerPort",
    # Infrastructure
    "PatternNarrower",
    "GitFileProvider",
]
