"""Decode raw terminal input into ``KeyStroke`` events."""

from __future__ import annotations

import codecs
import os
import select
import sys
from collections import deque
from typing import Deque, Optional, TextIO

from view_engine.keymaps import KeyStroke

ESC = "\x1b"

_CSI_FINAL_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_TILDE_KEYS = {
    "1": "home",
    "7": "home",  # rxvt
    "4": "end",
    "8": "end",  # rxvt
    "2": "insert",
    "3": "delete",
    "5": "pageup",
    "6": "pagedown",
}

_SS3_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_MODIFIER_BITS = ((1, "shift"), (2, "alt"), (4, "ctrl"), (8, "meta"))


def _xterm_modifiers(value: str) -> tuple[str, ...]:
    try:
        mask = int(value) - 1
    except ValueError:
        return ()
    return tuple(name for bit, name in _MODIFIER_BITS if mask & bit)


def _decode_csi(params: str, final: str) -> Optional[KeyStroke]:
    parts = params.split(";")
    modifiers = _xterm_modifiers(parts[1]) if len(parts) > 1 else ()
    if final == "~":
        key = _TILDE_KEYS.get(parts[0])
    else:
        key = _CSI_FINAL_KEYS.get(final)
    if key is None:
        return None
    return KeyStroke(key=key, modifiers=modifiers)


def decode_char(ch: str) -> KeyStroke:
    """Decode one non-escape character into a stroke."""

    if ch in ("\r", "\n"):
        return KeyStroke(key="enter")
    if ch == "\t":
        return KeyStroke(key="tab")
    if ch in ("\x7f", "\x08"):
        return KeyStroke(key="backspace")
    code = ord(ch)
    if code < 0x20:
        return KeyStroke(key=chr(code + 0x40).lower(), modifiers=("ctrl",))
    return KeyStroke(key=ch, text=ch)


def _parse_escape(data: str, start: int) -> tuple[Optional[KeyStroke], int]:
    """Parse the sequence at ``data[start]`` (an ESC).

    Returns the stroke (``None`` for unrecognized sequences) and the number of
    characters consumed; zero consumed means the sequence is incomplete.
    """

    if start + 1 >= len(data):
        return None, 0
    nxt = data[start + 1]
    if nxt == "[":
        end = start + 2
        while end < len(data) and not ("\x40" <= data[end] <= "\x7e"):
            end += 1
        if end >= len(data):
            return None, 0
        return _decode_csi(data[start + 2 : end], data[end]), end - start + 1
    if nxt == "O":
        if start + 2 >= len(data):
            return None, 0
        key = _SS3_KEYS.get(data[start + 2])
        return (KeyStroke(key=key) if key else None), 3
    if nxt == ESC:
        return KeyStroke(key="escape"), 1
    inner = decode_char(nxt)
    return KeyStroke(key=inner.key, modifiers=inner.modifiers + ("alt",)), 2


class KeyDecoder:
    """Incremental decoder holding back incomplete escape sequences."""

    def __init__(self) -> None:
        self._pending = ""

    @property
    def pending(self) -> bool:
        return bool(self._pending)

    def feed(self, text: str) -> list[KeyStroke]:
        data = self._pending + text
        self._pending = ""
        strokes: list[KeyStroke] = []
        index = 0
        while index < len(data):
            ch = data[index]
            if ch != ESC:
                strokes.append(decode_char(ch))
                index += 1
                continue
            stroke, consumed = _parse_escape(data, index)
            if consumed == 0:
                self._pending = data[index:]
                break
            if stroke is not None:
                strokes.append(stroke)
            index += consumed
        return strokes

    def flush(self) -> list[KeyStroke]:
        """Give up on a partial sequence: a lone ESC plus whatever followed it."""

        if not self._pending:
            return []
        rest, self._pending = self._pending[1:], ""
        return [KeyStroke(key="escape")] + [decode_char(ch) for ch in rest]


class TerminalKeySource:
    """``KeySource`` reading a raw-mode TTY with ``select``."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        *,
        escape_delay: float = 0.025,
        chunk_size: int = 1024,
    ) -> None:
        self._fd = (stdin or sys.stdin).fileno()
        self._utf8 = codecs.getincrementaldecoder("utf-8")("replace")
        self._decoder = KeyDecoder()
        self._queue: Deque[KeyStroke] = deque()
        self.escape_delay = escape_delay
        self.chunk_size = chunk_size

    def _wait(self, timeout: float) -> bool:
        readable, _, _ = select.select([self._fd], [], [], timeout)
        return bool(readable)

    def _read_chunk(self) -> str:
        data = os.read(self._fd, self.chunk_size)
        if not data:
            raise EOFError("terminal input closed")
        return self._utf8.decode(data)

    def read_key(self, timeout: float) -> Optional[KeyStroke]:
        if self._queue:
            return self._queue.popleft()
        if not self._wait(timeout):
            return None
        chunk = self._read_chunk()
        if not chunk:
            return None
        self._queue.extend(self._decoder.feed(chunk))
        while self._decoder.pending:
            if self._wait(self.escape_delay):
                # An empty chunk is a partial UTF-8 character; keep waiting.
                chunk = self._read_chunk()
                if chunk:
                    self._queue.extend(self._decoder.feed(chunk))
                continue
            self._queue.extend(self._decoder.flush())
        return self._queue.popleft() if self._queue else None


__all__ = ["KeyDecoder", "TerminalKeySource", "decode_char"]
