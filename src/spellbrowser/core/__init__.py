"""Core domain models."""

from .errors import CatalogLoadError, SpellNotVisibleError
from .sorting import locale_key
from .spell import ClassLevel, DescriptionBlock, Paragraph, SpellRecord, Table

__all__ = [
    "CatalogLoadError",
    "SpellNotVisibleError",
    "locale_key",
    "ClassLevel",
    "DescriptionBlock",
    "Paragraph",
    "SpellRecord",
    "Table",
]
