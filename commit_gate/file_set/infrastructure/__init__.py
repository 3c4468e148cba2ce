"""Infrastructure layer for file sets."""

from commit_gate.file_set.infrastructure.git_file_provider import GitFileProvider
from commit_gate.file_set.infrastructure.pattern_narrower import PatternNarrower

__all__ = ["PatternNarrower", "GitFileProvider"]
