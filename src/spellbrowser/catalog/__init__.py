"""Catalog loading and configuration."""

from .config import (
    DEFAULT_CATALOG_PATH,
    DEFAULT_CONFIG_PATH,
    Settings,
    load_config,
    load_settings,
)
from .loader import load_catalog, parse_catalog

__all__ = [
    # Config
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_CONFIG_PATH",
    "Settings",
    "load_config",
    "load_settings",
    # Loader
    "load_catalog",
    "parse_catalog",
]
