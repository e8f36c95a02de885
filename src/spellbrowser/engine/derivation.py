"""Pure derivations over the spell catalog and the current selection.

Every function here takes the catalog (or an already-filtered list) plus
selection values and returns a fresh list. Nothing is cached or mutated.
"""

from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass

from spellbrowser.core import SpellRecord, locale_key


@dataclass(frozen=True)
class SourceRef:
    """A rulebook source with the page reference of one spell."""

    source: str
    page: str | None


@dataclass(frozen=True)
class LevelGroup:
    """Spells sharing a level for the selected class."""

    level: int
    spells: tuple[SpellRecord, ...]


def _unique(values: Iterable) -> list:
    """Drop repeats, keeping first-seen order."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def source_list(catalog: Iterable[SpellRecord]) -> list[SourceRef]:
    """Distinct (source, page) pairs, sorted by source name."""
    refs = _unique(SourceRef(spell.source_id, spell.source_page) for spell in catalog)
    return sorted(refs, key=lambda ref: locale_key(ref.source))


def source_names(catalog: Iterable[SpellRecord]) -> list[str]:
    """Distinct source identifiers, sorted."""
    return sorted(_unique(spell.source_id for spell in catalog), key=locale_key)


def class_list(catalog: Iterable[SpellRecord]) -> list[str]:
    """Distinct class names in first-seen catalog order."""
    return _unique(
        entry.class_name
        for spell in catalog
        for entry in spell.class_levels
    )


def sorted_class_list(catalog: Iterable[SpellRecord]) -> list[str]:
    """Distinct class names, sorted for display in a picker."""
    return sorted(class_list(catalog), key=locale_key)


def matches_selection(
    spell: SpellRecord,
    selected_class: str | None,
    selected_source_names: Collection[str],
) -> bool:
    """Check the class and source filters for one spell.

    A None class passes every spell; the source must always be enabled.
    """
    if selected_class and not spell.has_class(selected_class):
        return False
    return spell.source_id in selected_source_names


def sort_key(spell: SpellRecord) -> tuple:
    """Order by the first classLevels entry's level, then by name.

    This deliberately ignores the selected class; level grouping does not.
    """
    return (spell.first_level, locale_key(spell.name))


def sorted_filtered_spells(
    catalog: Iterable[SpellRecord],
    selected_class: str | None,
    selected_source_names: Collection[str],
) -> list[SpellRecord]:
    """Filter the catalog by class and source, then sort by level and name."""
    matching = [
        spell
        for spell in catalog
        if matches_selection(spell, selected_class, selected_source_names)
    ]
    return sorted(matching, key=sort_key)


def spell_level(spell: SpellRecord, selected_class: str | None) -> int:
    """Level of a spell for the selected class (0 when there's no match)."""
    return spell.level_for(selected_class)


def spell_levels(spells: Iterable[SpellRecord], selected_class: str | None) -> list[int]:
    """Distinct per-class levels present in the list, ascending."""
    return sorted({spell_level(spell, selected_class) for spell in spells})


def spells_at_level(
    spells: Iterable[SpellRecord],
    selected_class: str | None,
    level: int,
) -> list[SpellRecord]:
    """Spells whose per-class level equals `level`, in their existing order."""
    return [spell for spell in spells if spell_level(spell, selected_class) == level]


def group_by_level(spells: Sequence[SpellRecord], selected_class: str | None) -> list[LevelGroup]:
    """Split an already-sorted list into one group per level."""
    return [
        LevelGroup(level=level, spells=tuple(spells_at_level(spells, selected_class, level)))
        for level in spell_levels(spells, selected_class)
    ]
