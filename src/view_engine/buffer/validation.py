"""Bounds checks shared by document readers."""

from __future__ import annotations


class DocumentIndexError(IndexError):
    """Raised when a caller asks for a line outside the document."""

    def __init__(self, index: int, line_count: int) -> None:
        super().__init__(f"Line {index} out of range (document has {line_count})")
        self.index = index
        self.line_count = line_count


def ensure_line_index(index: int, line_count: int) -> int:
    if index < 0 or index >= line_count:
        raise DocumentIndexError(index, line_count)
    return index
