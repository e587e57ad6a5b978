"""Append-only frame accumulator flushed once per refresh."""

from __future__ import annotations

import sys
from typing import Optional, Protocol, Union


class TextSink(Protocol):
    """Anything the frame can be written to (``sys.stdout``, ``io.StringIO``)."""

    def write(self, text: str) -> object:
        ...

    def flush(self) -> None:
        ...


class FrameWriteError(OSError):
    """Raised when bytes written into a frame are not valid UTF-8."""

    def __init__(self, message: str, *, data: bytes | None = None) -> None:
        super().__init__(message)
        self.data = data


class FrameBuffer:
    """Collects every draw command for one refresh cycle.

    ``flush`` hands the whole frame to the sink in a single ``write`` so the
    terminal never shows a half-drawn screen.
    """

    def __init__(self, sink: Optional[TextSink] = None) -> None:
        self._sink = sink
        self._parts: list[str] = []
        self._size = 0

    @property
    def sink(self) -> TextSink:
        return self._sink if self._sink is not None else sys.stdout

    def push(self, ch: str) -> None:
        self.push_str(ch)

    def push_str(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self._size += len(text)

    def write(self, data: Union[str, bytes, bytearray]) -> int:
        if isinstance(data, (bytes, bytearray)):
            try:
                text = bytes(data).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise FrameWriteError(
                    "write zero: frame data is not valid UTF-8", data=bytes(data)
                ) from exc
            self.push_str(text)
            return len(data)
        self.push_str(data)
        return len(data)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def clear(self) -> None:
        self._parts.clear()
        self._size = 0

    def flush(self) -> None:
        content = self.getvalue()
        sink = self.sink
        try:
            sink.write(content)
            sink.flush()
        finally:
            self.clear()

    def __len__(self) -> int:
        return self._size


__all__ = ["FrameBuffer", "FrameWriteError", "TextSink"]
