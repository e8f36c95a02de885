"""Web API for the spell browser."""

from spellbrowser.web.app import app
from spellbrowser.web.models import (
    HealthResponse,
    SelectionResponse,
    SpellListResponse,
    StatsResponse,
)

__all__ = [
    "app",
    "HealthResponse",
    "SelectionResponse",
    "SpellListResponse",
    "StatsResponse",
]
