"""Load and validate the JSON spell catalog."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from spellbrowser.core import CatalogLoadError, SpellRecord

logger = logging.getLogger(__name__)


def parse_catalog(data: object, path: Path | str = "<memory>") -> tuple[SpellRecord, ...]:
    """Validate raw catalog data into spell records.

    Args:
        data: Decoded JSON (must be a list of spell objects)
        path: Where the data came from, used in error messages

    Returns:
        Tuple of SpellRecord in catalog order

    Raises:
        CatalogLoadError: If the root isn't a list or any record is invalid
    """
    if not isinstance(data, list):
        raise CatalogLoadError(path, f"expected a JSON array of spells, got {type(data).__name__}")

    spells = []
    for index, raw in enumerate(data):
        try:
            spells.append(SpellRecord.model_validate(raw))
        except ValidationError as e:
            label = raw.get("name", "?") if isinstance(raw, dict) else "?"
            raise CatalogLoadError(path, f"invalid spell at index {index} ({label}): {e}") from e

    _warn_on_duplicates(spells)
    return tuple(spells)


def _warn_on_duplicates(spells: list[SpellRecord]) -> None:
    """Log names and per-spell classes that appear more than once."""
    seen_names = set()
    for spell in spells:
        if spell.name in seen_names:
            logger.warning(f"Duplicate spell name in catalog: {spell.name}")
        seen_names.add(spell.name)

        class_names = [entry.class_name for entry in spell.class_levels]
        for class_name in sorted(set(class_names)):
            if class_names.count(class_name) > 1:
                logger.warning(f"Spell {spell.name!r} lists class {class_name!r} more than once")


def load_catalog(path: Path) -> tuple[SpellRecord, ...]:
    """Read a catalog file from disk.

    Raises:
        CatalogLoadError: If the file is missing, not valid JSON, or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise CatalogLoadError(path, "catalog file not found")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(path, f"invalid JSON: {e}") from e

    spells = parse_catalog(data, path)
    logger.info(f"Loaded {len(spells)} spells from {path}")
    return spells
