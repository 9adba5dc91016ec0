"""Console rendering for installer text panels.

Responsibilities:
- Define the console contract panels print through.
- Provide a terminal implementation with soft wrapping and paging.

Key types:
- `Console`: protocol consumed by panels.
- `EndPanelChoice`: answer of the end-of-panel prompt.
- `TerminalConsole`: `typer`-backed terminal console.
"""

from __future__ import annotations

from enum import Enum
import re
import shutil
import textwrap
from typing import Protocol, TextIO

import typer


_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class EndPanelChoice(str, Enum):
    """Answer given at the end of a panel."""

    CONTINUE = "continue"
    QUIT = "quit"
    REDISPLAY = "redisplay"


class Console(Protocol):
    """Protocol for the console a panel prints to."""

    def println(self, text: str = "") -> None:
        """Print one line."""

    def print_multi_line(self, text: str, wordwrap: bool, paging: bool) -> None:
        """Print multiline text; raise `OSError` when output fails."""

    def prompt_end_panel(self) -> EndPanelChoice:
        """Ask whether to continue, quit or redisplay the panel."""


def split_display_lines(text: str) -> list[str]:
    """Split text on `\\r\\n`, `\\r` or `\\n`, one break per marker."""

    return _LINE_BREAK_RE.split(text)


def wrap_display_lines(lines: list[str], width: int) -> list[str]:
    """Soft-wrap each line to `width`, keeping blank lines and tab-led text."""

    wrapped: list[str] = []
    for line in lines:
        if not line.strip():
            wrapped.append("")
            continue
        wrapped.extend(
            textwrap.wrap(
                line,
                width=width,
                expand_tabs=False,
                replace_whitespace=False,
                break_on_hyphens=False,
            )
            or [""]
        )
    return wrapped


class TerminalConsole:
    """Print panel text to a terminal stream.

    Width and height default to the current terminal size (80x25 when unknown).
    Paging shows `height - 1` lines, then waits for Enter.
    """

    _END_PANEL_PROMPT = "Press 1 to continue, 2 to quit, 3 to redisplay"
    _END_PANEL_CHOICES = {
        "1": EndPanelChoice.CONTINUE,
        "2": EndPanelChoice.QUIT,
        "3": EndPanelChoice.REDISPLAY,
    }

    def __init__(
        self,
        out: TextIO | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        size = shutil.get_terminal_size((80, 25))
        self._out = out
        self.width = max(width or size.columns, 10)
        self.height = max(height or size.lines, 2)

    def println(self, text: str = "") -> None:
        typer.echo(text, file=self._out)

    def print_multi_line(self, text: str, wordwrap: bool, paging: bool) -> None:
        """Print `text` line by line, wrapping and pausing as requested."""

        lines = split_display_lines(text)
        if wordwrap:
            lines = wrap_display_lines(lines, self.width)

        page_size = self.height - 1
        for index, line in enumerate(lines, start=1):
            typer.echo(line, file=self._out)
            if paging and index % page_size == 0 and index < len(lines):
                self._wait_for_continue()

    def prompt_end_panel(self) -> EndPanelChoice:
        """Prompt until the user picks one of the three end-of-panel answers."""

        while True:
            answer = typer.prompt(self._END_PANEL_PROMPT, default="1", show_default=False)
            choice = self._END_PANEL_CHOICES.get(answer.strip())
            if choice is not None:
                return choice
            typer.echo("Invalid choice.", file=self._out)

    def _wait_for_continue(self) -> None:
        typer.prompt(
            "--More-- press Enter to continue",
            default="",
            show_default=False,
            prompt_suffix="",
        )
