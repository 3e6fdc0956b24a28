"""Label table.

Maps label names to the index of the command that follows the label. The
table is filled in during the load pass and only ever grows. Lookups happen at
run time, which is what lets a ``goto`` refer to a label further down the file.


File: labels.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterator

from nondelang.exceptions import DuplicateLabelError


class LabelTable:
    """Append-only mapping from label name to command index."""

    def __init__(self):
        self._labels: dict[str, int] = {}
        self._lines: dict[str, int | None] = {}

    def add(self, name: str, index: int, line: int | None = None) -> None:
        """
        Register ``name`` as pointing at command ``index``.

        Raises:
            DuplicateLabelError: If the label already exists.
        """
        if self.find(name) is not None:
            raise DuplicateLabelError(name, line)
        self._labels[name] = index
        self._lines[name] = line

    def find(self, name: str) -> int | None:
        """
        Return the command index for ``name``, or None if it isn't declared.
        """
        return self._labels.get(name)

    def line_of(self, name: str) -> int | None:
        """
        Return the source line ``name`` was declared on, if known.
        """
        return self._lines.get(name)

    def __contains__(self, name) -> bool:
        return name in self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        """Iterate (name, index) pairs in declaration order."""
        return iter(self._labels.items())

    def __repr__(self) -> str:
        return f"LabelTable({self._labels!r})"
