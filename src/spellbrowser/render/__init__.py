"""Presentation helpers for spell details and terminal browsing."""

from .detail import (
    COMPONENT_DELIMITER,
    REVERSIBLE_MARKER,
    REVERSIBLE_NOTE,
    SpellDetail,
    build_spell_detail,
    display_name,
    pad_table,
)
from .terminal import (
    Colors,
    format_level_groups,
    format_spell_detail,
    format_table,
    interactive_mode,
    run_command,
)

__all__ = [
    # Detail
    "COMPONENT_DELIMITER",
    "REVERSIBLE_MARKER",
    "REVERSIBLE_NOTE",
    "SpellDetail",
    "build_spell_detail",
    "display_name",
    "pad_table",
    # Terminal
    "Colors",
    "format_level_groups",
    "format_spell_detail",
    "format_table",
    "interactive_mode",
    "run_command",
]
