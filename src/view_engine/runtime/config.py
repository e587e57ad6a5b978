"""Viewer settings resolved from ``VIEW_ENGINE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from view_engine import __version__

ENV_PREFIX = "VIEW_ENGINE_"
DEFAULT_POLL_MS = 500
DEFAULT_FILLER = "~"
DEFAULT_WELCOME = f"View Engine -- version {__version__}"


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Tunables shared by the composer, dispatcher, and entry points."""

    poll_timeout_ms: int = DEFAULT_POLL_MS
    filler: str = DEFAULT_FILLER
    welcome: str = DEFAULT_WELCOME

    def __post_init__(self) -> None:
        if self.poll_timeout_ms <= 0:
            raise ValueError("poll_timeout_ms must be positive")
        if len(self.filler) != 1:
            raise ValueError("filler must be a single character")

    @property
    def poll_timeout(self) -> float:
        return self.poll_timeout_ms / 1000.0

    def with_overrides(
        self,
        *,
        poll_timeout_ms: Optional[int] = None,
    ) -> "ViewerConfig":
        if poll_timeout_ms is None:
            return self
        return replace(self, poll_timeout_ms=poll_timeout_ms)


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def load_config(env: Optional[Mapping[str, str]] = None) -> ViewerConfig:
    source = os.environ if env is None else env
    poll_ms = _env_int(source, f"{ENV_PREFIX}POLL_MS", DEFAULT_POLL_MS)
    if poll_ms <= 0:
        poll_ms = DEFAULT_POLL_MS
    filler = source.get(f"{ENV_PREFIX}FILLER") or DEFAULT_FILLER
    if len(filler) != 1:
        filler = DEFAULT_FILLER
    welcome = source.get(f"{ENV_PREFIX}WELCOME") or DEFAULT_WELCOME
    return ViewerConfig(poll_timeout_ms=poll_ms, filler=filler, welcome=welcome)


__all__ = ["ViewerConfig", "load_config"]
