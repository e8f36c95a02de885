"""Browse and filter a tabletop spell catalog by class and source."""

__version__ = "0.1.0"
