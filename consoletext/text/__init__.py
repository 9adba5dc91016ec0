"""Markup normalization components.

This package provides the named entity table and the ordered rewrite rules
that turn installer markup into console-ready plain text.
"""

from .codepage import is_windows_platform, reencode_for_console
from .entities import ENTITY_TABLE, EntityTable
from .markup_rules import (
    CollapseBreakWhitespace,
    CollapseSourceWhitespace,
    ConvertBlockBreaks,
    ConvertTableCells,
    DecodeNamedEntities,
    DropUnknownEntities,
    RemoveOpaqueBlocks,
    RemoveSuperscripts,
    StripRemainingTags,
    SubstituteConsoleSymbols,
    default_markup_rules,
)
from .normalizer import MarkupNormalizer, remove_html

__all__ = [
    "ENTITY_TABLE",
    "EntityTable",
    "MarkupNormalizer",
    "remove_html",
    "default_markup_rules",
    "CollapseSourceWhitespace",
    "RemoveOpaqueBlocks",
    "RemoveSuperscripts",
    "ConvertTableCells",
    "ConvertBlockBreaks",
    "StripRemainingTags",
    "SubstituteConsoleSymbols",
    "DecodeNamedEntities",
    "DropUnknownEntities",
    "CollapseBreakWhitespace",
    "is_windows_platform",
    "reencode_for_console",
]
