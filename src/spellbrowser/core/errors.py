"""Exceptions raised by the spell browser."""


class CatalogLoadError(ValueError):
    """The spell catalog is missing or malformed."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class SpellNotVisibleError(LookupError):
    """A spell was requested that is not in the current filtered list."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Spell not visible with current filters: {name}")
