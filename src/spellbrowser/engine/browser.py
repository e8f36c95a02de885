"""Spell browser session: a fixed catalog plus mutable selection state."""

import logging
from collections.abc import Iterable
from functools import cached_property

from spellbrowser.core import SpellNotVisibleError, SpellRecord
from . import derivation
from .derivation import LevelGroup, SourceRef
from .selection import PopupRegion, SelectionState

logger = logging.getLogger(__name__)


class SpellBrowser:
    """Holds the catalog and selection, and exposes the derived views.

    The catalog is read-only after construction, so catalog-only views
    (sources, classes) are computed once. Views that depend on the
    selection are recomputed from scratch on every access.
    """

    def __init__(
        self,
        catalog: Iterable[SpellRecord],
        selected_class: str | None = None,
        selected_sources: Iterable[str] = (),
    ):
        """Initialize a browsing session.

        Args:
            catalog: Spell records in catalog order
            selected_class: Initial class filter (None for no class filter)
            selected_sources: Initially enabled source identifiers
        """
        self._catalog = tuple(catalog)
        self.state = SelectionState(
            selected_class=selected_class or None,
            selected_source_names=set(selected_sources),
        )

    @property
    def catalog(self) -> tuple[SpellRecord, ...]:
        return self._catalog

    # Catalog-only views

    @cached_property
    def source_list(self) -> list[SourceRef]:
        return derivation.source_list(self._catalog)

    @cached_property
    def source_names(self) -> list[str]:
        return derivation.source_names(self._catalog)

    @cached_property
    def class_list(self) -> list[str]:
        return derivation.class_list(self._catalog)

    @cached_property
    def sorted_class_list(self) -> list[str]:
        return derivation.sorted_class_list(self._catalog)

    # Selection-dependent views

    @property
    def selected_class(self) -> str | None:
        return self.state.selected_class

    @property
    def selected_source_names(self) -> list[str]:
        """Enabled sources in display order (known sources first, then unknown)."""
        enabled = self.state.selected_source_names
        known = [name for name in self.source_names if name in enabled]
        unknown = sorted(enabled.difference(known))
        return known + unknown

    @property
    def sorted_filtered_spells(self) -> list[SpellRecord]:
        return derivation.sorted_filtered_spells(
            self._catalog,
            self.state.selected_class,
            self.state.selected_source_names,
        )

    @property
    def spell_levels(self) -> list[int]:
        return derivation.spell_levels(self.sorted_filtered_spells, self.state.selected_class)

    @property
    def level_groups(self) -> list[LevelGroup]:
        return derivation.group_by_level(self.sorted_filtered_spells, self.state.selected_class)

    def spells_at_level(self, level: int) -> list[SpellRecord]:
        return derivation.spells_at_level(
            self.sorted_filtered_spells, self.state.selected_class, level
        )

    @property
    def popup_spell(self) -> SpellRecord | None:
        return self.state.selected_spell

    @property
    def no_scroll(self) -> bool:
        return self.state.no_scroll

    # Mutators

    def pick_class(self, name: str | None) -> None:
        self.state.pick_class(name)
        logger.debug(f"Selected class: {self.state.selected_class}")

    def toggle_source(self, name: str, enabled: bool) -> None:
        self.state.toggle_source(name, enabled)
        logger.debug(f"Source {name!r} {'enabled' if enabled else 'disabled'}")

    def find_visible(self, name: str) -> SpellRecord:
        """Look up a spell by name among the currently listed spells.

        Raises:
            SpellNotVisibleError: If no listed spell has that name
        """
        for spell in self.sorted_filtered_spells:
            if spell.name == name:
                return spell
        raise SpellNotVisibleError(name)

    def open_spell(self, name: str) -> SpellRecord:
        """Open the detail popup for a listed spell."""
        spell = self.find_visible(name)
        self.state.open_spell(spell)
        logger.debug(f"Opened spell: {spell.name}")
        return spell

    def close_popup(self) -> None:
        self.state.close_popup()
        logger.debug("Closed spell popup")

    def click_popup(self, region: PopupRegion) -> None:
        self.state.click_popup(region)
