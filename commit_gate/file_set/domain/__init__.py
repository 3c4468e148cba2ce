"""Domain layer for file sets."""

from commit_gate.file_set.domain.file_interest import FileInterest
from commit_gate.file_set.domain.file_set import FileSet
from commit_gate.file_set.domain.narrower_port import FileSetNarrowerPort

__all__ = ["FileSet", "FileInterest", "FileSetNarrowerPort"]
