"""Test fixtures for asana-csv-import tests."""

from .golden_documents import GOLDEN_DOCUMENT_FULL, GOLDEN_DOCUMENT_MINIMAL
from .records import (
    ASANA_COLUMNS,
    LINK_BASE,
    create_export,
    create_full_record,
    create_minimal_record,
    create_record,
    create_untitled_record,
    write_csv,
)

__all__ = [
    "ASANA_COLUMNS",
    "LINK_BASE",
    "create_export",
    "create_full_record",
    "create_minimal_record",
    "create_record",
    "create_untitled_record",
    "write_csv",
    "GOLDEN_DOCUMENT_FULL",
    "GOLDEN_DOCUMENT_MINIMAL",
]
