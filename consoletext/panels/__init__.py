"""Console installer panels.

This package provides the text panels that display licence and info content
and the finish panel that reports the install outcome.
"""

from .base import AbstractTextConsolePanel, render_text
from .finish import FinishConsolePanel
from .text import (
    HTMLInfoConsolePanel,
    HTMLLicenceConsolePanel,
    InfoConsolePanel,
    LicenceConsolePanel,
    ResourceTextConsolePanel,
)

__all__ = [
    "AbstractTextConsolePanel",
    "render_text",
    "ResourceTextConsolePanel",
    "LicenceConsolePanel",
    "InfoConsolePanel",
    "HTMLLicenceConsolePanel",
    "HTMLInfoConsolePanel",
    "FinishConsolePanel",
]
