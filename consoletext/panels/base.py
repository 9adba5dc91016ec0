"""Console text panel orchestration.

Responsibilities:
- Prepare panel text: substitute variables, optionally strip markup, re-encode.
- Run a text panel against a console, treating display failures as non-fatal.

Key public symbols:
- `render_text`: text preparation shared by every text panel.
- `AbstractTextConsolePanel`: base class for panels that display one text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import InstallContext, PanelConfig
from ..console import Console, EndPanelChoice
from ..telemetry.logger import PanelLogger
from ..text.codepage import (
    DEFAULT_HOST_CHARSET,
    DEFAULT_LEGACY_CODEPAGE,
    is_windows_platform,
    reencode_for_console,
)
from ..text.normalizer import MarkupNormalizer
from ..variables import VariableSubstitutor


def render_text(
    raw_content: str | None,
    substitutor: VariableSubstitutor,
    platform: str | None,
    *,
    strip_html: bool,
    normalizer: MarkupNormalizer | None = None,
    legacy_codepage: str = DEFAULT_LEGACY_CODEPAGE,
    host_charset: str = DEFAULT_HOST_CHARSET,
) -> str | None:
    """Turn raw panel content into console text.

    Returns `None` when there is no content; the normalizer is not called then.
    """

    text = substitutor.replace(raw_content)
    if text is None:
        return None
    if strip_html:
        text = (normalizer or MarkupNormalizer()).normalize(text)
    if is_windows_platform(platform):
        text = reencode_for_console(text, legacy_codepage, host_charset)
    return text


class AbstractTextConsolePanel(ABC):
    """Console panel displaying one, possibly paged, block of text."""

    def __init__(
        self,
        panel: PanelConfig,
        install: InstallContext,
        *,
        logger: PanelLogger | None = None,
        normalizer: MarkupNormalizer | None = None,
    ) -> None:
        self.panel = panel
        self.install = install
        self._logger = logger or PanelLogger()
        self._normalizer = normalizer or MarkupNormalizer()

    @property
    def strip_html(self) -> bool:
        """Whether panel content is markup to normalize before display."""

        return self.panel.strip_html

    @abstractmethod
    def get_text(self) -> str | None:
        """Return the raw text to display, or `None` when it is unavailable."""

    def remove_html(self, text: str | None) -> str:
        """Strip markup from `text` with this panel's normalizer."""

        return self._normalizer.normalize(text)

    def prepare_text(self) -> str | None:
        """Fetch and render the panel text; `None` means nothing to display."""

        return render_text(
            self.get_text(),
            self.install.substitutor(),
            self.install.platform,
            strip_html=self.strip_html,
            normalizer=self._normalizer,
            legacy_codepage=self.install.legacy_codepage,
            host_charset=self.install.host_charset,
        )

    def display(self, console: Console) -> None:
        """Print headline and text once; display failures are logged, not raised."""

        if self.panel.headline:
            console.println(self.panel.headline)
            console.println()

        text = self.prepare_text()
        if text is None:
            self._logger.log_text_missing(self.panel.panel_id)
            return

        rules = self.install.rules
        paging = self.panel.paging(rules)
        wordwrap = self.panel.wordwrap(rules)
        try:
            console.print_multi_line(text, wordwrap, paging)
        except OSError as exc:
            self._logger.log_display_failure(self.panel.panel_id, exc)

    def run(self, console: Console, *, prompt: bool = True) -> bool:
        """Display the panel, then ask to continue, quit or redisplay.

        Returns `True` to continue with the next panel and `False` to quit.
        """

        self._logger.log_panel_start(self.panel.panel_id)
        while True:
            self.display(console)
            if not prompt:
                choice = EndPanelChoice.CONTINUE
                break
            choice = console.prompt_end_panel()
            if choice is not EndPanelChoice.REDISPLAY:
                break
        self._logger.log_panel_complete(self.panel.panel_id, choice.value)
        return choice is EndPanelChoice.CONTINUE
