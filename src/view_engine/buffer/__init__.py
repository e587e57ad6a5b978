"""Document storage and bounds validation."""

from .document import Document, DocumentLoadError, split_lines
from .validation import DocumentIndexError, ensure_line_index

__all__ = [
    "Document",
    "DocumentIndexError",
    "DocumentLoadError",
    "ensure_line_index",
    "split_lines",
]
