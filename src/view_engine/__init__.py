"""Terminal read/navigate viewer engine."""

__all__ = [
    "adapters",
    "buffer",
    "keymaps",
    "render",
    "runtime",
    "viewport",
]

__version__ = "0.1.0"
