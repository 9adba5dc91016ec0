"""Ordered markup rewrite rules for console text rendering.

Responsibilities:
- Provide one rule per normalization stage, each a pure `apply(text)` rewrite.
- Keep every rewrite regex-based and line-oriented; no markup tree is built.

Conventions:
- `\\r` is the line-break marker in rule output, `\\t` approximates table cells.
- Tag matching is case-sensitive.
- Block removal never crosses a line terminator.
"""

from __future__ import annotations

import re
from typing import Protocol

from .entities import ENTITY_TABLE, EntityTable


# Any character except a line terminator (`\n`, `\r`, NEL, LS, PS).
_SAME_LINE_CHAR = "[^\n\r\u0085\u2028\u2029]"


class MarkupRule(Protocol):
    """Protocol for one markup rewrite stage."""

    def apply(self, text: str) -> str:
        """Apply a single rewrite stage."""


class CollapseSourceWhitespace:
    """Neutralize source line endings and tabs, then collapse space runs."""

    _SPACE_RUN_RE = re.compile(r"( )+")

    def apply(self, text: str) -> str:
        """Turn `\\r` into spaces, drop tabs, collapse repeated spaces."""

        text = text.replace("\r", " ").replace("\t", "")
        return self._SPACE_RUN_RE.sub(" ", text)


class RemoveOpaqueBlock:
    """Normalize one element's tags and delete its same-line content."""

    def __init__(self, tag: str, *, closing_first: bool = False) -> None:
        """Compile tag patterns for element `tag`."""

        self.tag = tag
        self._closing_first = closing_first
        self._open_re = re.compile(rf"<( )*{tag}([^>])*>")
        self._close_re = re.compile(rf"(<( )*(/)( )*{tag}( )*>)")
        self._block_re = re.compile(rf"(<{tag}>){_SAME_LINE_CHAR}*(</{tag}>)")

    def apply(self, text: str) -> str:
        """Rewrite tags to bare tokens and drop the block between them."""

        if self._closing_first:
            text = self._close_re.sub(f"</{self.tag}>", text)
            text = self._open_re.sub(f"<{self.tag}>", text)
        else:
            text = self._open_re.sub(f"<{self.tag}>", text)
            text = self._close_re.sub(f"</{self.tag}>", text)
        return self._block_re.sub("", text)


class RemoveOpaqueBlocks:
    """Drop `head`, `script` and `style` blocks in that order."""

    def __init__(self) -> None:
        self._rules = [RemoveOpaqueBlock(tag) for tag in ("head", "script", "style")]

    def apply(self, text: str) -> str:
        for rule in self._rules:
            text = rule.apply(text)
        return text


class RemoveSuperscripts(RemoveOpaqueBlock):
    """Drop `<sup>` blocks such as footnote markers."""

    def __init__(self) -> None:
        super().__init__("sup", closing_first=True)


class ConvertTableCells:
    """Replace `<td>` openings with a tab."""

    _TD_RE = re.compile(r"<( )*td([^>])*>")

    def apply(self, text: str) -> str:
        return self._TD_RE.sub("\t", text)


class ConvertBlockBreaks:
    """Translate line and paragraph tags into `\\r` breaks."""

    _REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
        (re.compile(r"<( )*br( )*>"), "\r"),
        (re.compile(r"<( )*li( )*>"), "\r"),
        (re.compile(r"<( )*div([^>])*>"), "\r\r"),
        (re.compile(r"<( )*tr([^>])*>"), "\r\r"),
        (re.compile(r"(<) h ([A-Za-z0-9_]+) >"), "\r"),
        (re.compile(r"(\b) (</) h ([A-Za-z0-9_]+) (>) (\b)"), ""),
        (re.compile(r"<( )*p([^>])*>"), "\r\r"),
    )

    def apply(self, text: str) -> str:
        """Apply break rewrites in their fixed order."""

        for pattern, replacement in self._REWRITES:
            text = pattern.sub(replacement, text)
        return text


class StripRemainingTags:
    """Delete anything still enclosed in angle brackets."""

    _TAG_RE = re.compile(r"<[^>]*>")

    def apply(self, text: str) -> str:
        return self._TAG_RE.sub("", text)


PRE_DECODE_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("&bull;", " * "),
    ("&lsaquo;", "<"),
    ("&rsaquo;", ">"),
    ("&trade;", "(tm)"),
    ("&frasl;", "/"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&copy;", "(c)"),
    ("&reg;", "(r)"),
)


class SubstituteConsoleSymbols:
    """Replace a few references with console-friendly ASCII before decoding.

    These substitutions shadow the matching entries of the general table.
    """

    def apply(self, text: str) -> str:
        for reference, replacement in PRE_DECODE_SUBSTITUTIONS:
            text = text.replace(reference, replacement)
        return text


class DecodeNamedEntities:
    """Decode `&name;` references one table entry at a time, in table order.

    A reference produced by an earlier entry (`&amp;eacute;` gives `&eacute;`)
    is decoded again when its own entry comes later in the table.
    """

    def __init__(self, table: EntityTable = ENTITY_TABLE) -> None:
        self._references = tuple(table.references())

    def apply(self, text: str) -> str:
        """Replace every known reference with its character."""

        if "&" not in text:
            return text
        for reference, character in self._references:
            text = text.replace(reference, character)
        return text


class DropUnknownEntities:
    """Delete reference-shaped leftovers that were not decoded."""

    _SHORT_REFERENCE_RE = re.compile(rf"&({_SAME_LINE_CHAR}{{2,6}});")
    _LONG_NAMED_REFERENCE_RE = re.compile(r"&[A-Za-z][A-Za-z0-9]{6,};")

    def apply(self, text: str) -> str:
        """Remove `&xx;`..`&xxxxxx;` tokens, then overlong named references."""

        text = self._SHORT_REFERENCE_RE.sub("", text)
        return self._LONG_NAMED_REFERENCE_RE.sub("", text)


class CollapseBreakWhitespace:
    """Remove spaces and stray tabs sitting between breaks and cell tabs."""

    _REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
        (re.compile(r"(\r)( )+(\r)"), "\r\r"),
        (re.compile(r"(\t)( )+(\t)"), "\t\t"),
        (re.compile(r"(\t)( )+(\r)"), "\t\r"),
        (re.compile(r"(\r)( )+(\t)"), "\r\t"),
        (re.compile(r"(\r)(\t)+(\r)"), "\r\r"),
        (re.compile(r"(\r)(\t)+"), "\r\t"),
    )

    def apply(self, text: str) -> str:
        for pattern, replacement in self._REWRITES:
            text = pattern.sub(replacement, text)
        return text


def default_markup_rules(table: EntityTable = ENTITY_TABLE) -> list[MarkupRule]:
    """Return the standard rule sequence; the order is part of the output contract."""

    return [
        CollapseSourceWhitespace(),
        RemoveOpaqueBlocks(),
        RemoveSuperscripts(),
        ConvertTableCells(),
        ConvertBlockBreaks(),
        StripRemainingTags(),
        SubstituteConsoleSymbols(),
        DecodeNamedEntities(table),
        DropUnknownEntities(),
        CollapseBreakWhitespace(),
    ]
