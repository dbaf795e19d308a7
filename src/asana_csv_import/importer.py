"""
Asana CSV importer.

Ties the CSV reader to the RecordMapper behind the interface the
destination import tooling expects from every source.
"""

from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_ENCODING, DEFAULT_TEAM_NAME, IMPORTER_NAME, StatusSource
from .converter import ConversionResult, RecordMapper
from .markup import MarkupConverter, to_target_markup
from .models import ImportDocument
from .reader import read_records


class AsanaCsvImporter:
    """
    Import issues from an Asana CSV export.

    Example:
        importer = AsanaCsvImporter("export.csv", "https://app.asana.com/0/1204417431012397/")
        document = importer.import_data()
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        org_slug: Optional[str] = None,
        markup_converter: MarkupConverter = to_target_markup,
        status_source: Union[StatusSource, str] = StatusSource.SECTION,
        encoding: str = DEFAULT_ENCODING,
    ):
        """
        Args:
            file_path: Path to the CSV export
            org_slug: Base Asana project URL used for back-links
            markup_converter: Function converting notes markup
            status_source: Column deciding issue status
            encoding: CSV file encoding
        """
        self.file_path = Path(file_path)
        self.organization_name = org_slug
        self.encoding = encoding
        self._mapper = RecordMapper(
            link_base=org_slug,
            markup_converter=markup_converter,
            status_source=status_source,
        )

    @property
    def name(self) -> str:
        return IMPORTER_NAME

    @property
    def default_team_name(self) -> str:
        return DEFAULT_TEAM_NAME

    def convert(self) -> ConversionResult:
        """Read the export and map it, keeping warnings and errors."""
        records = read_records(self.file_path, encoding=self.encoding)
        return self._mapper.map(records)

    def import_data(self) -> ImportDocument:
        """Read the export and return the mapped ImportDocument."""
        return self.convert().document
