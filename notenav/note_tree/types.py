"""Node datatype for the in-memory notes tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(eq=False)
class Node:
    """One file or directory under the notes root.

    Directories own their ``children`` exclusively; there are no parent links.
    ``loaded`` marks a directory whose children reflect a completed scan, so an
    empty ``children`` list is ambiguous only while ``loaded`` is false.
    """

    name: str
    path: Path
    is_dir: bool
    expanded: bool = False
    title: str = ""
    children: list["Node"] = field(default_factory=list)
    loaded: bool = False

    def display_name(self) -> str:
        """Return the row label: a file's title when present, else its name."""
        if self.is_dir:
            return self.name
        title = self.title.strip()
        return title if title else self.name


__all__ = ["Node"]
