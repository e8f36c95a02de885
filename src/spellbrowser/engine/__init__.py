"""Selection and derivation engine."""

from .browser import SpellBrowser
from .derivation import (
    LevelGroup,
    SourceRef,
    class_list,
    group_by_level,
    sort_key,
    sorted_class_list,
    sorted_filtered_spells,
    source_list,
    source_names,
    spell_level,
    spell_levels,
    spells_at_level,
)
from .selection import PopupRegion, SelectionState

__all__ = [
    # Browser
    "SpellBrowser",
    # Derivation
    "LevelGroup",
    "SourceRef",
    "class_list",
    "group_by_level",
    "sort_key",
    "sorted_class_list",
    "sorted_filtered_spells",
    "source_list",
    "source_names",
    "spell_level",
    "spell_levels",
    "spells_at_level",
    # Selection
    "PopupRegion",
    "SelectionState",
]
