"""Textual host for the viewer (``app`` needs the ``textual`` package)."""

from .controller import TextualUIHooks, TextualViewerAdapter, normalize_textual_key

__all__ = ["TextualUIHooks", "TextualViewerAdapter", "normalize_textual_key"]
