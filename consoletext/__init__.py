"""Top-level package for consoletext.

This package renders installer licence and info markup as plain console text.
The main entry point is `MarkupNormalizer`; console panels live in
`consoletext.panels`.
"""

from .text import ENTITY_TABLE, EntityTable, MarkupNormalizer, remove_html

__all__ = ["ENTITY_TABLE", "EntityTable", "MarkupNormalizer", "remove_html", "__version__"]

__version__ = "0.1.0"
