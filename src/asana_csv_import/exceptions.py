"""Exceptions raised by asana-csv-import."""


class AsanaImportError(Exception):
    """Base class for import failures."""


class SourceReadError(AsanaImportError):
    """The CSV export could not be read."""
