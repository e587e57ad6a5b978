"""Read-only document storage for the viewer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from view_engine.runtime.telemetry import span

from .validation import ensure_line_index

PathLike = Union[str, Path]


class DocumentLoadError(RuntimeError):
    """Raised when a document path is given but cannot be read as UTF-8."""

    def __init__(self, message: str, *, path: PathLike | None = None) -> None:
        super().__init__(message)
        self.path = path


def split_lines(text: str) -> tuple[str, ...]:
    """Split ``text`` on ``\\n`` the way the viewer numbers lines.

    A trailing newline does not open an extra empty line and a ``\\r`` left
    over from CRLF endings is dropped. Other separators (form feed, U+2028,
    ...) stay inside the line.
    """

    if not text:
        return ()
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return tuple(part[:-1] if part.endswith("\r") else part for part in parts)


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable list-of-lines model loaded once per session."""

    lines: tuple[str, ...] = ()
    path: Optional[Path] = None

    @classmethod
    def from_text(cls, text: str, *, path: Optional[Path] = None) -> "Document":
        return cls(lines=split_lines(text), path=path)

    @classmethod
    def from_path(cls, path: PathLike | None) -> "Document":
        """Load ``path`` fully into memory; ``None`` yields an empty document."""

        if path is None:
            return cls()
        source = Path(path)
        with span(
            "document::load",
            component="document",
            metadata={"path": str(source)},
        ) as handle:
            try:
                text = source.read_text(encoding="utf-8")
            except UnicodeDecodeError as exc:
                raise DocumentLoadError(
                    f"{source}: not valid UTF-8 ({exc.reason})", path=source
                ) from exc
            except OSError as exc:
                reason = exc.strerror or str(exc)
                raise DocumentLoadError(f"{source}: {reason}", path=source) from exc
            document = cls.from_text(text, path=source)
            handle.add_metadata("line_count", document.line_count)
            return document

    def snapshot(self) -> Sequence[str]:
        return self.lines

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def line_at(self, index: int) -> str:
        return self.lines[ensure_line_index(index, len(self.lines))]
