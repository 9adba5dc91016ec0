"""Test doubles shared across the consoletext test suite."""

from __future__ import annotations

from consoletext.console import EndPanelChoice


class RecordingConsole:
    """In-memory console capturing everything a panel prints."""

    def __init__(
        self,
        choices: list[EndPanelChoice] | None = None,
        fail_with: OSError | None = None,
    ) -> None:
        self.lines: list[str] = []
        self.multi_line_calls: list[tuple[str, bool, bool]] = []
        self.prompt_count = 0
        self._choices = list(choices or [])
        self._fail_with = fail_with

    def println(self, text: str = "") -> None:
        self.lines.append(text)

    def print_multi_line(self, text: str, wordwrap: bool, paging: bool) -> None:
        if self._fail_with is not None:
            raise self._fail_with
        self.multi_line_calls.append((text, wordwrap, paging))

    def prompt_end_panel(self) -> EndPanelChoice:
        self.prompt_count += 1
        if self._choices:
            return self._choices.pop(0)
        return EndPanelChoice.CONTINUE
