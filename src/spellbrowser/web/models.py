"""Pydantic models for the web API."""

from pydantic import BaseModel, Field

from spellbrowser import __version__
from spellbrowser.engine import PopupRegion


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "ok"
    version: str = __version__


class StatsResponse(BaseModel):
    """Response for stats endpoint."""

    total_spells: int
    catalog_loaded: bool


class ClassesResponse(BaseModel):
    classes: list[str]
    selected: str | None


class SourcesResponse(BaseModel):
    sources: list[str]
    selected: list[str]


class SelectionResponse(BaseModel):
    """Current selection state of the session."""

    selected_class: str | None
    selected_sources: list[str]
    popup_spell: str | None
    no_scroll: bool


class PickClassRequest(BaseModel):
    """Request body for selecting a class (null or "" clears it)."""

    class_name: str | None = Field(default=None, description="Class to filter by")


class ToggleSourceRequest(BaseModel):
    """Request body for enabling or disabling a source by name."""

    name: str = Field(..., description="Source name as listed by /api/sources")
    enabled: bool = Field(..., description="Whether the source should be enabled")


class SpellSummary(BaseModel):
    """A spell as listed in a level group."""

    name: str
    display_name: str
    school: str
    source: str


class LevelGroupResponse(BaseModel):
    level: int
    spells: list[SpellSummary]


class SpellListResponse(BaseModel):
    """Filtered spells grouped by level for the selected class."""

    selected_class: str | None
    count: int
    levels: list[int]
    groups: list[LevelGroupResponse]


class OpenSpellRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Name of a listed spell")


class PopupClickRequest(BaseModel):
    region: PopupRegion = Field(..., description="Where the click landed: body, backdrop or close")
