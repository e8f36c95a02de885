"""Selection state for one browsing session."""

from dataclasses import dataclass, field
from enum import Enum

from spellbrowser.core import SpellRecord


class PopupRegion(str, Enum):
    """Where a click landed while the detail popup is open."""

    BODY = "body"
    BACKDROP = "backdrop"
    CLOSE_BUTTON = "close"


@dataclass
class SelectionState:
    """Current class, enabled sources and open spell.

    Transitions are applied directly; there are no pending states.
    """

    selected_class: str | None = None
    selected_source_names: set[str] = field(default_factory=set)
    selected_spell: SpellRecord | None = None

    @property
    def no_scroll(self) -> bool:
        """Page scrolling is locked while the popup is open."""
        return self.selected_spell is not None

    def pick_class(self, name: str | None) -> None:
        # An empty picker value means "no class"
        self.selected_class = name or None

    def toggle_source(self, name: str, enabled: bool) -> None:
        if enabled:
            self.selected_source_names.add(name)
        else:
            self.selected_source_names.discard(name)

    def open_spell(self, spell: SpellRecord) -> None:
        self.selected_spell = spell

    def close_popup(self) -> None:
        self.selected_spell = None

    def click_popup(self, region: PopupRegion) -> None:
        """Handle a click on the popup; clicks inside the body keep it open."""
        if PopupRegion(region) is not PopupRegion.BODY:
            self.close_popup()
