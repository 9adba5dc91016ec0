"""Console finish panel reporting install success or failure."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from ..console import Console
from ..telemetry.logger import PanelLogger


BUILD_FAILED_MARKER = "BUILD FAILED"

DEFAULT_FINISH_MESSAGES: Mapping[str, str] = {
    "FinishPanel.success": "Installation has completed successfully.",
    "FinishPanel.uninst.info": "An uninstaller program has been created in:",
    "FinishPanel.fail": "Installation failed!",
    "FinishPanel.fail.check.file": "Check the following log file for details:",
}


def file_contains(path: Path, needle: str, *, case_insensitive: bool = True) -> bool:
    """Return whether any line of `path` contains `needle`; missing files give `False`."""

    if not path.is_file():
        return False
    target = needle.lower() if case_insensitive else needle
    with path.open(encoding="utf-8", errors="replace") as handle:
        for line in handle:
            haystack = line.lower() if case_insensitive else line
            if target in haystack:
                return True
    return False


@dataclass(slots=True)
class FinishConsolePanel:
    """Print the final install outcome.

    Attributes:
        install_success: Outcome reported by earlier install steps.
        log_file: Temporary install log scanned for build failures.
        uninstaller_path: Where the uninstaller was written, when one exists.
        messages: Message overrides keyed like `DEFAULT_FINISH_MESSAGES`.
    """

    install_success: bool = True
    log_file: Path | None = None
    uninstaller_path: Path | None = None
    messages: dict[str, str] = field(default_factory=dict)
    panel_id: str = "finish"

    def message(self, key: str) -> str:
        return self.messages.get(key, DEFAULT_FINISH_MESSAGES.get(key, key))

    def resolve_success(self) -> bool:
        """Downgrade to failure when the install log reports a failed build."""

        if self.log_file is not None and file_contains(self.log_file, BUILD_FAILED_MARKER):
            self.install_success = False
        return self.install_success

    def run(self, console: Console, logger: PanelLogger | None = None) -> bool:
        """Print the outcome; returns whether the install succeeded."""

        panel_logger = logger or PanelLogger()
        panel_logger.log_panel_start(self.panel_id)
        if self.resolve_success():
            console.println(self.message("FinishPanel.success"))
            if self.uninstaller_path is not None:
                console.println(self.message("FinishPanel.uninst.info"))
                console.println(str(self.uninstaller_path))
        else:
            console.println(self.message("FinishPanel.fail"))
            console.println(self.message("FinishPanel.fail.check.file"))
            if self.log_file is not None:
                console.println(str(self.log_file))
        outcome = "success" if self.install_success else "failure"
        panel_logger.log_panel_complete(self.panel_id, outcome)
        return self.install_success
