"""Normalized key events shared by every input source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single decoded key press: key name, modifier set, optional text.

    Named keys use lowercase names (``"up"``, ``"pagedown"``, ``"home"``);
    printable keys use the character itself.
    """

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+q"`` style tokens."""

        cleaned = token.strip()
        if not cleaned:
            raise ValueError("token cannot be empty")
        if cleaned == "+" or cleaned.endswith("++"):
            head, key = cleaned[:-1], "+"
        else:
            head, _, key = cleaned.rpartition("+")
        modifiers = tuple(part for part in head.split("+") if part)
        return cls(key=key, modifiers=modifiers)


__all__ = ["KeyStroke"]
