"""POSIX terminal collaborators: raw mode, geometry, and key decoding."""

from .keys import KeyDecoder, TerminalKeySource, decode_char
from .rawmode import RawMode, query_window_size

__all__ = [
    "KeyDecoder",
    "RawMode",
    "TerminalKeySource",
    "decode_char",
    "query_window_size",
]
