"""Structured panel logging utilities.

Responsibilities:
- Emit concise, deterministic panel-level runtime logs through `loguru`.
- Keep non-fatal display problems visible without interrupting the panel flow.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class PanelLogger:
    """Emit deterministic event lines for console panel activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to `sink` (stderr by default) with plain formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, panel: str, **context: object) -> None:
        """Emit one structured panel log line."""

        line = f"[panel] level={level} panel={panel} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_panel_start(self, panel: str) -> None:
        self._emit("INFO", "start", panel)

    def log_panel_complete(self, panel: str, choice: str) -> None:
        self._emit("INFO", "complete", panel, choice=choice)

    def log_text_missing(self, panel: str) -> None:
        """Warn that the panel has no text to display."""

        self._emit("WARNING", "no_text", panel, message="No text to display")

    def log_display_failure(self, panel: str, error: BaseException) -> None:
        """Warn that rendering multiline text failed; the panel keeps going."""

        self._emit(
            "WARNING",
            "display_failure",
            panel,
            error_type=type(error).__name__,
            message=f"Displaying multiline text failed: {error}",
        )
