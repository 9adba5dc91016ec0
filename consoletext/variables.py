"""Installer variable substitution for panel text."""

from __future__ import annotations

from string import Template
from typing import Mapping


class _PanelTemplate(Template):
    """`$name` / `${name}` template allowing dotted and dashed braced names."""

    braceidpattern = r"(?a:[_a-z][_a-z0-9.\-]*)"


class VariableSubstitutor:
    """Replace `${name}` and `$name` placeholders with installer variables.

    Unknown placeholders are kept verbatim and `$$` yields a literal `$`.
    """

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._variables = dict(variables or {})

    @property
    def variables(self) -> dict[str, str]:
        return dict(self._variables)

    def replace(self, text: str | None) -> str | None:
        """Substitute placeholders in `text`; `None` passes through unchanged."""

        if text is None:
            return None
        return _PanelTemplate(text).safe_substitute(self._variables)
