"""
Asana CSV Import.

Convert an Asana CSV export into a normalized import document of
issues, users and labels for a destination issue tracker.

CLI usage::

    asana-csv-import convert export.csv --org-url https://app.asana.com/0/1204417431012397/
    asana-csv-import summary export.csv

Programmatic usage::

    from asana_csv_import import RecordMapper, read_records

    records = read_records("export.csv")
    result = RecordMapper(link_base="https://app.asana.com/0/1204417431012397/").map(records)
    document = result.document
"""

__version__ = "0.1.0"

from .converter import ConversionResult, RecordMapper, map_records
from .exceptions import AsanaImportError, SourceReadError
from .importer import AsanaCsvImporter
from .markup import identity_markup, to_target_markup
from .models import ImportDocument, Issue, Label, User
from .reader import read_records

__all__ = [
    "AsanaCsvImporter",
    "AsanaImportError",
    "ConversionResult",
    "ImportDocument",
    "Issue",
    "Label",
    "RecordMapper",
    "SourceReadError",
    "User",
    "identity_markup",
    "map_records",
    "read_records",
    "to_target_markup",
    "__version__",
]
