"""FastAPI application for the spell browser."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from spellbrowser import __version__
from spellbrowser.catalog import load_catalog, load_settings
from spellbrowser.core import SpellNotVisibleError
from spellbrowser.engine import SpellBrowser
from spellbrowser.render import SpellDetail, build_spell_detail, display_name
from spellbrowser.web.models import (
    ClassesResponse,
    HealthResponse,
    LevelGroupResponse,
    OpenSpellRequest,
    PickClassRequest,
    PopupClickRequest,
    SelectionResponse,
    SourcesResponse,
    SpellListResponse,
    SpellSummary,
    StatsResponse,
    ToggleSourceRequest,
)

# Static files directory (built frontend)
STATIC_DIR = Path(__file__).parent.parent.parent.parent / "data" / "static"

# The single browsing session served by this process
_browser: SpellBrowser | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the catalog before serving; a bad catalog stops startup."""
    global _browser
    settings = load_settings()
    catalog = load_catalog(settings.catalog_path)
    _browser = SpellBrowser(
        catalog,
        selected_class=settings.default_class,
        selected_sources=settings.default_sources,
    )
    yield
    _browser = None


app = FastAPI(
    title="Spell Browser API",
    description="Filter a spell catalog by class and source, grouped by level",
    version=__version__,
    lifespan=lifespan,
)


def get_browser() -> SpellBrowser:
    """Return the active session or fail with 503 if no catalog is loaded."""
    if _browser is None:
        raise HTTPException(status_code=503, detail="Catalog not loaded")
    return _browser


def selection_response(browser: SpellBrowser) -> SelectionResponse:
    popup = browser.popup_spell
    return SelectionResponse(
        selected_class=browser.selected_class,
        selected_sources=browser.selected_source_names,
        popup_spell=popup.name if popup else None,
        no_scroll=browser.no_scroll,
    )


@app.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@app.get("/api/stats", response_model=StatsResponse)
async def stats() -> StatsResponse:
    """Get catalog statistics."""
    if _browser is None:
        return StatsResponse(total_spells=0, catalog_loaded=False)
    return StatsResponse(total_spells=len(_browser.catalog), catalog_loaded=True)


@app.get("/api/classes", response_model=ClassesResponse)
async def classes() -> ClassesResponse:
    browser = get_browser()
    return ClassesResponse(classes=browser.sorted_class_list, selected=browser.selected_class)


@app.get("/api/sources", response_model=SourcesResponse)
async def sources() -> SourcesResponse:
    browser = get_browser()
    return SourcesResponse(sources=browser.source_names, selected=browser.selected_source_names)


@app.get("/api/selection", response_model=SelectionResponse)
async def selection() -> SelectionResponse:
    return selection_response(get_browser())


@app.put("/api/selection/class", response_model=SelectionResponse)
async def pick_class(request: PickClassRequest) -> SelectionResponse:
    browser = get_browser()
    browser.pick_class(request.class_name)
    return selection_response(browser)


@app.put("/api/selection/sources", response_model=SelectionResponse)
async def toggle_source(request: ToggleSourceRequest) -> SelectionResponse:
    """Enable or disable a source by name."""
    browser = get_browser()
    browser.toggle_source(request.name, request.enabled)
    return selection_response(browser)


@app.get("/api/spells", response_model=SpellListResponse)
async def spells() -> SpellListResponse:
    """List the filtered spells grouped by level for the selected class."""
    browser = get_browser()
    groups = browser.level_groups
    return SpellListResponse(
        selected_class=browser.selected_class,
        count=sum(len(group.spells) for group in groups),
        levels=[group.level for group in groups],
        groups=[
            LevelGroupResponse(
                level=group.level,
                spells=[
                    SpellSummary(
                        name=spell.name,
                        display_name=display_name(spell),
                        school=spell.school,
                        source=spell.source,
                    )
                    for spell in group.spells
                ],
            )
            for group in groups
        ],
    )


@app.get("/api/popup", response_model=SpellDetail | None)
async def popup() -> SpellDetail | None:
    """Get the detail view of the open spell, or null if none is open."""
    spell = get_browser().popup_spell
    return build_spell_detail(spell) if spell else None


@app.post("/api/popup", response_model=SpellDetail)
async def open_spell(request: OpenSpellRequest) -> SpellDetail:
    """Open a listed spell in the detail popup."""
    browser = get_browser()
    try:
        spell = browser.open_spell(request.name)
    except SpellNotVisibleError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return build_spell_detail(spell)


@app.post("/api/popup/click", response_model=SelectionResponse)
async def click_popup(request: PopupClickRequest) -> SelectionResponse:
    """Register a click on the popup; only body clicks keep it open."""
    browser = get_browser()
    browser.click_popup(request.region)
    return selection_response(browser)


@app.delete("/api/popup", response_model=SelectionResponse)
async def close_popup() -> SelectionResponse:
    browser = get_browser()
    browser.close_popup()
    return selection_response(browser)


# Static file serving for frontend
if STATIC_DIR.exists():
    # Mount static assets (JS, CSS, etc.)
    assets_dir = STATIC_DIR / "assets"
    if assets_dir.exists():
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    @app.get("/{full_path:path}")
    async def serve_spa(full_path: str):
        """Serve the SPA for all non-API routes."""
        if full_path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not found")

        file_path = STATIC_DIR / full_path
        if file_path.is_file():
            return FileResponse(file_path)

        index_path = STATIC_DIR / "index.html"
        if index_path.exists():
            return FileResponse(index_path)

        raise HTTPException(status_code=404, detail="Frontend not built")
