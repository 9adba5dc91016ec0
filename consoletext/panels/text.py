"""Resource-backed licence and info panels."""

from __future__ import annotations

from pathlib import Path

from .base import AbstractTextConsolePanel


class ResourceTextConsolePanel(AbstractTextConsolePanel):
    """Text panel reading its content from the configured resource file."""

    def get_text(self) -> str | None:
        """Read the resource; a missing or unreadable file gives `None`."""

        path: Path | None = self.panel.content_path
        if path is None:
            return None
        try:
            return path.read_text(encoding=self.panel.content_encoding)
        except (OSError, UnicodeDecodeError):
            return None


class LicenceConsolePanel(ResourceTextConsolePanel):
    """Plain-text licence shown as is."""

    @property
    def strip_html(self) -> bool:
        return False


class InfoConsolePanel(LicenceConsolePanel):
    """Plain-text information (readme) shown as is."""


class HTMLLicenceConsolePanel(ResourceTextConsolePanel):
    """HTML licence converted to console text."""

    @property
    def strip_html(self) -> bool:
        return True


class HTMLInfoConsolePanel(HTMLLicenceConsolePanel):
    """HTML information (readme) converted to console text."""


def panel_class_for(strip_html: bool) -> type[ResourceTextConsolePanel]:
    """Pick the info panel class matching the markup mode."""

    return HTMLInfoConsolePanel if strip_html else InfoConsolePanel
