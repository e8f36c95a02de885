"""Unit tests for the catalog derivation functions."""

import pytest

from spellbrowser.core import SpellRecord
from spellbrowser.engine.derivation import (
    LevelGroup,
    SourceRef,
    class_list,
    group_by_level,
    sorted_class_list,
    sorted_filtered_spells,
    source_list,
    source_names,
    spell_level,
    spell_levels,
    spells_at_level,
)


def make_spell(name: str, source: str, class_levels: list[tuple[str, int]], **extra) -> SpellRecord:
    """Create a spell record with only the fields derivations care about."""
    return SpellRecord.model_validate({
        "name": name,
        "school": "Evocation",
        "source": source,
        "classLevels": [{"className": c, "level": lvl} for c, lvl in class_levels],
        **extra,
    })


@pytest.fixture
def bless():
    return make_spell("Bless", "Players HB - 12", [("Cleric", 1)])


@pytest.fixture
def aid():
    return make_spell("Aid", "Players HB - 20", [("Cleric", 2), ("Paladin", 2)])


@pytest.fixture
def mixed_catalog():
    """Catalog spanning several classes, sources and level orderings."""
    return [
        make_spell("Moonbeam", "Tome of Magic - 49", [("Druid", 3), ("Cleric", 4)]),
        make_spell("Entangle", "Players HB - 125", [("Druid", 1), ("Ranger", 1)]),
        make_spell("Magic Missile", "Players HB - 171", [("Wizard", 1)]),
        make_spell("Aid", "Players HB - 20", [("Cleric", 2), ("Paladin", 2)]),
        make_spell("Bless", "Players HB - 12", [("Cleric", 1)]),
        make_spell("Orison", "Tome of Magic - 8", [("Cleric", 0)]),
        make_spell("Cure Light Wounds", "Players HB - 14", [("Cleric", 1), ("Druid", 2)]),
        make_spell("Augury", "Arcane Codex - 3", [("Cleric", 2)]),
    ]


class TestSourceEnumeration:
    """Tests for source_names() and source_list()."""

    def test_source_names_distinct_and_sorted(self, mixed_catalog):
        assert source_names(mixed_catalog) == ["Arcane Codex", "Players HB", "Tome of Magic"]

    def test_source_name_uses_text_before_first_dash(self):
        spell = make_spell("X", "Book-of-Things - 4", [("Cleric", 1)])
        assert source_names([spell]) == ["Book"]

    def test_source_without_page(self):
        spell = make_spell("X", "Homebrew", [("Cleric", 1)])
        assert source_names([spell]) == ["Homebrew"]
        assert source_list([spell]) == [SourceRef("Homebrew", None)]

    def test_sort_is_case_insensitive(self):
        spells = [
            make_spell("A", "zeta - 1", [("Cleric", 1)]),
            make_spell("B", "Alpha - 1", [("Cleric", 1)]),
            make_spell("C", "beta - 1", [("Cleric", 1)]),
        ]
        assert source_names(spells) == ["Alpha", "beta", "zeta"]

    def test_source_list_keeps_pages(self, mixed_catalog):
        refs = source_list(mixed_catalog)
        assert refs[0] == SourceRef("Arcane Codex", "3")
        assert [ref.source for ref in refs] == sorted(
            [ref.source for ref in refs], key=str.casefold
        )
        assert SourceRef("Players HB", "171") in refs
        assert len(refs) == len(set(refs))

    def test_empty_catalog(self):
        assert source_names([]) == []
        assert source_list([]) == []


class TestClassEnumeration:
    """Tests for class_list() and sorted_class_list()."""

    def test_first_seen_order(self, mixed_catalog):
        assert class_list(mixed_catalog) == ["Druid", "Cleric", "Ranger", "Wizard", "Paladin"]

    def test_sorted_copy(self, mixed_catalog):
        assert sorted_class_list(mixed_catalog) == ["Cleric", "Druid", "Paladin", "Ranger", "Wizard"]

    def test_no_duplicates(self, mixed_catalog):
        classes = class_list(mixed_catalog)
        assert len(classes) == len(set(classes))

    def test_empty_catalog(self):
        assert class_list([]) == []
        assert sorted_class_list([]) == []


class TestSortedFilteredSpells:
    """Tests for the filter-and-sort pipeline."""

    def test_class_and_source_filters(self, mixed_catalog):
        result = sorted_filtered_spells(mixed_catalog, "Cleric", {"Players HB"})
        assert [s.name for s in result] == ["Bless", "Cure Light Wounds", "Aid"]

    def test_every_result_matches_both_filters(self, mixed_catalog):
        result = sorted_filtered_spells(mixed_catalog, "Druid", {"Players HB", "Tome of Magic"})
        assert result
        for spell in result:
            assert any(cl.class_name == "Druid" for cl in spell.class_levels)
            assert spell.source_id in {"Players HB", "Tome of Magic"}

    def test_no_class_keeps_all_classes(self, mixed_catalog):
        result = sorted_filtered_spells(mixed_catalog, None, {"Players HB"})
        assert {s.name for s in result} == {
            "Entangle", "Magic Missile", "Aid", "Bless", "Cure Light Wounds"
        }

    def test_empty_sources_yields_nothing(self, mixed_catalog):
        assert sorted_filtered_spells(mixed_catalog, "Cleric", set()) == []
        assert sorted_filtered_spells(mixed_catalog, None, []) == []

    def test_unknown_class_yields_nothing(self, mixed_catalog):
        assert sorted_filtered_spells(mixed_catalog, "Bard", {"Players HB"}) == []

    def test_sort_uses_first_class_level_not_selected_class(self):
        """Moonbeam is Cleric 4 but sorts by its first entry (Druid 3)."""
        spells = [
            make_spell("Zeal", "PHB - 1", [("Cleric", 4)]),
            make_spell("Moonbeam", "PHB - 2", [("Druid", 3), ("Cleric", 4)]),
            make_spell("Alpha", "PHB - 3", [("Druid", 5), ("Cleric", 1)]),
        ]
        result = sorted_filtered_spells(spells, "Cleric", {"PHB"})
        assert [s.name for s in result] == ["Moonbeam", "Zeal", "Alpha"]

    def test_ties_broken_by_name(self):
        spells = [
            make_spell("charm", "PHB - 1", [("Wizard", 1)]),
            make_spell("Burning Hands", "PHB - 2", [("Wizard", 1)]),
            make_spell("Armor", "PHB - 3", [("Wizard", 1)]),
        ]
        result = sorted_filtered_spells(spells, "Wizard", {"PHB"})
        assert [s.name for s in result] == ["Armor", "Burning Hands", "charm"]

    def test_stable_under_repeated_computation(self, mixed_catalog):
        first = sorted_filtered_spells(mixed_catalog, None, {"Players HB", "Tome of Magic"})
        second = sorted_filtered_spells(mixed_catalog, None, {"Players HB", "Tome of Magic"})
        assert first == second

    def test_catalog_not_mutated(self, mixed_catalog):
        before = list(mixed_catalog)
        sorted_filtered_spells(mixed_catalog, "Cleric", {"Players HB"})
        assert mixed_catalog == before


class TestLevelGrouping:
    """Tests for spell_levels(), spells_at_level() and group_by_level()."""

    def test_scenario_cleric_players_hb(self, bless, aid):
        result = sorted_filtered_spells([bless, aid], "Cleric", ["Players HB"])
        assert [s.name for s in result] == ["Bless", "Aid"]
        assert spell_levels(result, "Cleric") == [1, 2]
        assert [s.name for s in spells_at_level(result, "Cleric", 1)] == ["Bless"]
        assert [s.name for s in spells_at_level(result, "Cleric", 2)] == ["Aid"]

    def test_scenario_no_sources(self, bless, aid):
        result = sorted_filtered_spells([bless, aid], "Cleric", [])
        assert result == []
        assert spell_levels(result, "Cleric") == []
        assert group_by_level(result, "Cleric") == []

    def test_scenario_no_class_collapses_to_level_zero(self, bless, aid):
        result = sorted_filtered_spells([bless, aid], None, ["Players HB"])
        assert len(result) == 2
        assert spell_levels(result, None) == [0]
        groups = group_by_level(result, None)
        assert len(groups) == 1
        assert groups[0].level == 0
        assert [s.name for s in groups[0].spells] == ["Bless", "Aid"]

    def test_spell_level_uses_selected_class(self):
        spell = make_spell("Moonbeam", "PHB - 2", [("Druid", 3), ("Cleric", 4)])
        assert spell_level(spell, "Cleric") == 4
        assert spell_level(spell, "Druid") == 3
        assert spell_level(spell, "Wizard") == 0
        assert spell_level(spell, None) == 0

    def test_groups_keep_sorted_order(self, mixed_catalog):
        result = sorted_filtered_spells(mixed_catalog, "Cleric", {"Players HB", "Tome of Magic"})
        groups = group_by_level(result, "Cleric")
        assert [g.level for g in groups] == [0, 1, 2, 4]
        level_one = next(g for g in groups if g.level == 1)
        assert [s.name for s in level_one.spells] == ["Bless", "Cure Light Wounds"]

    def test_partition_law(self, mixed_catalog):
        """Every filtered spell lands in exactly one level group."""
        for selected_class in [None, "Cleric", "Druid", "Wizard"]:
            result = sorted_filtered_spells(
                mixed_catalog, selected_class, {"Players HB", "Tome of Magic", "Arcane Codex"}
            )
            groups = group_by_level(result, selected_class)
            flattened = [spell for group in groups for spell in group.spells]
            assert sorted(flattened, key=lambda s: s.name) == sorted(result, key=lambda s: s.name)
            assert len(flattened) == len(result)

    def test_levels_match_distinct_per_class_levels(self, mixed_catalog):
        result = sorted_filtered_spells(mixed_catalog, "Druid", {"Players HB", "Tome of Magic"})
        expected = sorted({spell.level_for("Druid") for spell in result})
        assert spell_levels(result, "Druid") == expected

    def test_group_type(self, bless):
        assert group_by_level([bless], "Cleric") == [LevelGroup(level=1, spells=(bless,))]
