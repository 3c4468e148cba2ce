"""
File interest model.
Describes which paths a task wants to look at.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileInterest:
    """
    Declared file interest of a task.

    Attributes:
        extensions: File extensions to keep (e.g. ".py"). Empty keeps every extension.
        include: Glob patterns a path must match. Empty matches every path.
        exclude: Glob patterns that drop a path even if it was included.
    """

    extensions: tuple[str, ...] = ()
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    @classmethod
    def everything(cls) -> "FileInterest":
        """Interest that accepts every path."""
        return cls()

    def is_unrestricted(self) -> bool:
        """Check if this interest keeps every path."""
        return not (self.extensions or self.include or self.exclude)
