"""Viewport geometry, cursor movement, and scroll reconciliation."""

from .state import Direction, ViewportState, WindowSize

__all__ = ["Direction", "ViewportState", "WindowSize"]
