"""DMS: a catalog of external links mirrored as editable proxy documents."""

__version__ = "0.1.0"
