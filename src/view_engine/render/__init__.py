"""Frame batching, control sequences, and screen composition."""

from .composer import ScreenComposer, clip, welcome_row
from .frame import FrameBuffer, FrameWriteError, TextSink

__all__ = [
    "FrameBuffer",
    "FrameWriteError",
    "ScreenComposer",
    "TextSink",
    "clip",
    "welcome_row",
]
