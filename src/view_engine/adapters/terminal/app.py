"""Command-line entry point running the viewer on the controlling terminal."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from view_engine.buffer import Document, DocumentLoadError
from view_engine.keymaps import InputDispatcher
from view_engine.render import FrameBuffer, ScreenComposer
from view_engine.runtime import telemetry
from view_engine.runtime.config import ViewerConfig, load_config
from view_engine.runtime.session import Session
from view_engine.viewport import ViewportState, WindowSize

from .keys import TerminalKeySource
from .rawmode import RawMode, query_window_size


def build_session(
    document: Document,
    window: WindowSize,
    *,
    config: ViewerConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Session:
    """Wire the engine components around a TTY key source and output stream."""

    viewport = ViewportState(window)
    composer = ScreenComposer(
        document, viewport, frame=FrameBuffer(stdout), config=config
    )
    dispatcher = InputDispatcher(
        TerminalKeySource(stdin),
        window.rows,
        poll_timeout=config.poll_timeout,
    )
    return Session(document, viewport, composer, dispatcher)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="view-engine", description="Page through a text file in the terminal."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to view (omit for an empty session)",
    )
    parser.add_argument(
        "--poll-ms",
        type=int,
        default=None,
        help="Key poll interval in milliseconds (default: VIEW_ENGINE_POLL_MS or 500)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (default: VIEW_ENGINE_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.lower,
        choices=telemetry.LOG_LEVELS,
        help="Minimum telemetry level (default: VIEW_ENGINE_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_file or args.log_level:
        telemetry.configure(
            config=telemetry.build_config(level=args.log_level, log_file=args.log_file)
        )
    try:
        config = load_config().with_overrides(poll_timeout_ms=args.poll_ms)
    except ValueError as exc:
        print(f"view-engine: {exc}", file=sys.stderr)
        return 2

    try:
        document = Document.from_path(args.path)
    except DocumentLoadError as exc:
        print(f"view-engine: {exc}", file=sys.stderr)
        return 1

    session = build_session(document, query_window_size(), config=config)
    with RawMode(session.composer.clear_screen):
        return session.run()


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
