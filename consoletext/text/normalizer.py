"""Markup-to-plain-text normalization for console panels.

Responsibilities:
- Run the ordered markup rewrite rules over one text blob.
- Stay total: every input, including empty or malformed markup, yields text.
"""

from __future__ import annotations

from .entities import ENTITY_TABLE, EntityTable
from .markup_rules import MarkupRule, default_markup_rules


class MarkupNormalizer:
    """Convert HTML-flavoured markup into `\\r`-delimited plain text."""

    def __init__(
        self,
        rules: list[MarkupRule] | None = None,
        table: EntityTable = ENTITY_TABLE,
    ) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules = rules or default_markup_rules(table)

    def normalize(self, text: str | None) -> str:
        """Apply all rules in order; `None` and empty input give `""`."""

        if not text:
            return ""
        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current


_DEFAULT_NORMALIZER = MarkupNormalizer()


def remove_html(text: str | None) -> str:
    """Normalize `text` with the shared default normalizer."""

    return _DEFAULT_NORMALIZER.normalize(text)
