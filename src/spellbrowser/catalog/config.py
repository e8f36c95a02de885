"""Settings for the spell browser, read from YAML with environment overrides."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

# Default paths relative to project root
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "spellbrowser.yaml"
DEFAULT_CATALOG_PATH = PROJECT_ROOT / "data" / "spells.json"

DEFAULT_CLASS = "Cleric"
DEFAULT_SOURCES = ("Players HB",)

# Environment variables that override the config file
ENV_CONFIG = "SPELLBROWSER_CONFIG"
ENV_CATALOG = "SPELLBROWSER_CATALOG"
ENV_DEFAULT_CLASS = "SPELLBROWSER_DEFAULT_CLASS"


@dataclass
class Settings:
    """Resolved runtime settings."""

    catalog_path: Path = DEFAULT_CATALOG_PATH
    default_class: str | None = DEFAULT_CLASS
    default_sources: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))


def _resolve_path(value: str | Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def load_config(config_path: Path | None = None) -> dict:
    """Load the YAML config file.

    Args:
        config_path: Explicit config path. If None, uses config/spellbrowser.yaml
            and returns an empty dict when that file doesn't exist.

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If an explicitly requested config file is missing
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return {}
        config_path = DEFAULT_CONFIG_PATH
    elif not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def load_settings(config_path: Path | None = None) -> Settings:
    """Build Settings from the config file, .env and the process environment."""
    load_dotenv()

    if config_path is None and os.environ.get(ENV_CONFIG):
        config_path = _resolve_path(os.environ[ENV_CONFIG])

    config = load_config(config_path)
    settings = Settings()

    if config.get("catalog_path"):
        settings.catalog_path = _resolve_path(config["catalog_path"])
    if "default_class" in config:
        settings.default_class = config["default_class"] or None
    if "default_sources" in config:
        settings.default_sources = list(config["default_sources"] or [])

    if os.environ.get(ENV_CATALOG):
        settings.catalog_path = _resolve_path(os.environ[ENV_CATALOG])
    if ENV_DEFAULT_CLASS in os.environ:
        settings.default_class = os.environ[ENV_DEFAULT_CLASS] or None

    return settings
