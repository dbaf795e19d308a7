"""
Asana record mapper - main orchestration for converting CSV rows.

This module provides the RecordMapper class which turns the rows of an
Asana CSV export into a single ImportDocument of issues, users and
labels for the destination importer.
"""

import json
import logging
import traceback
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional, Union

from .constants import Column, StatusSource
from .markup import MarkupConverter, to_target_markup
from .mappers import (
    AssigneeMapper,
    CompletionStatusMapper,
    DescriptionMapper,
    DueDateMapper,
    EstimateMapper,
    LabelsMapper,
    LinkMapper,
    Mapper,
    MapperContext,
    PriorityMapper,
    SectionStatusMapper,
    SourceRecord,
)
from .models import ImportDocument, Issue, Label, User

logger = logging.getLogger(__name__)


class ConversionResult:
    """
    Result of mapping an Asana export.

    Attributes:
        document: The ImportDocument built from the export
        record_count: Number of source rows read
        warnings: Non-fatal issues encountered
        errors: Field mappers that failed and fell back
        error_details: Structured error info with tracebacks
    """

    def __init__(
        self,
        document: ImportDocument,
        record_count: int = 0,
        warnings: Optional[list[str]] = None,
        errors: Optional[list[str]] = None,
        error_details: Optional[list[dict[str, Any]]] = None,
    ):
        self.document = document
        self.record_count = record_count
        self.warnings = warnings or []
        self.errors = errors or []
        self.error_details = error_details or []

    @property
    def skipped_count(self) -> int:
        """Rows dropped for having no title."""
        return self.record_count - len(self.document.issues)

    @property
    def is_valid(self) -> bool:
        """Whether every field mapped without falling back on an error."""
        return not self.has_errors

    @property
    def has_warnings(self) -> bool:
        """Check if conversion produced warnings."""
        return len(self.warnings) > 0

    @property
    def has_errors(self) -> bool:
        """Check if conversion produced errors."""
        return len(self.errors) > 0

    def to_json(self, indent: Optional[int] = 2, include_nulls: bool = False) -> str:
        """
        Serialize the import document to JSON string.

        Args:
            indent: JSON indentation (None for compact)
            include_nulls: Whether to include null values

        Returns:
            JSON string representation
        """
        data = self.document.to_dict()
        if not include_nulls:
            data = _remove_nulls(data)
        return json.dumps(data, indent=indent, default=str)


def _remove_nulls(obj: Any) -> Any:
    """Recursively remove null values from dicts."""
    if isinstance(obj, dict):
        return {k: _remove_nulls(v) for k, v in obj.items() if v is not None}
    elif isinstance(obj, list):
        return [_remove_nulls(item) for item in obj]
    return obj


class RecordMapper:
    """
    Maps Asana CSV rows to an ImportDocument.

    Users are collected from every row, titled or not. Each titled row
    then becomes one Issue, its fields produced by a list of field
    mappers, and its tags are registered in the label directory.

    Example:
        from asana_csv_import import RecordMapper, read_records

        records = read_records("asana_export.csv")
        mapper = RecordMapper(link_base="https://app.asana.com/0/1204417431012397/")
        result = mapper.map(records)

        for warning in result.warnings:
            print(warning)
        mapper.write_json(result, "import.json")

    Attributes:
        link_base: Prefix for back-links to Asana, or None
        markup_converter: Converts notes to the destination markup
        mappers: Field mappers, run in order for each titled row
    """

    def __init__(
        self,
        link_base: Optional[str] = None,
        markup_converter: MarkupConverter = to_target_markup,
        status_source: Union[StatusSource, str] = StatusSource.SECTION,
        mappers: Optional[list[Mapper]] = None,
    ):
        """
        Initialize the mapper.

        Args:
            link_base: URL prefix joined verbatim with the task id
            markup_converter: Function converting notes markup
            status_source: Column deciding issue status, "section" or "completion"
            mappers: Optional list of field mappers. If None, uses the
                     default mappers for the given status source.
        """
        self.link_base = link_base or None
        self.markup_converter = markup_converter
        self.status_source = StatusSource(status_source)
        self.mappers = mappers or self._default_mappers()

    def _default_mappers(self) -> list[Mapper]:
        """
        Create the default set of field mappers.

        Order matters: LinkMapper stores the url on the context
        that DescriptionMapper appends.
        """
        if self.status_source is StatusSource.COMPLETION:
            status_mapper: Mapper = CompletionStatusMapper()
        else:
            status_mapper = SectionStatusMapper()

        return [
            LinkMapper(),
            DescriptionMapper(),
            status_mapper,
            PriorityMapper(),
            AssigneeMapper(),
            LabelsMapper(),
            DueDateMapper(),
            EstimateMapper(),
        ]

    def map(self, records: Iterable[SourceRecord]) -> ConversionResult:
        """
        Map Asana rows to an ImportDocument.

        Args:
            records: Source rows in export order

        Returns:
            ConversionResult holding the document and any issues found
        """
        # Errors raised while iterating belong to the reader and propagate
        rows = list(records)

        document = ImportDocument(users=self._collect_users(rows))
        warnings: list[str] = []
        errors: list[str] = []
        error_details: list[dict[str, Any]] = []

        for row in rows:
            context = MapperContext(
                record=row,
                link_base=self.link_base,
                markup_converter=self.markup_converter,
            )

            if not context.title:
                logger.debug(f"Skipping untitled task {context.task_id or '<no id>'}")
                continue

            issue = self._map_issue(context, error_details)
            document.issues.append(issue)

            for name in issue.labels:
                if name not in document.labels:
                    document.labels[name] = Label(name=name)

            prefix = f"Task {context.task_id or '<no id>'}"
            warnings.extend(f"{prefix}: {w}" for w in context.warnings)
            errors.extend(f"{prefix}: {e}" for e in context.errors)

        logger.info(
            f"Mapped {len(document.issues)} issues, {len(document.users)} users, "
            f"{len(document.labels)} labels from {len(rows)} records"
        )

        return ConversionResult(
            document=document,
            record_count=len(rows),
            warnings=warnings,
            errors=errors,
            error_details=error_details,
        )

    def _collect_users(self, rows: list[SourceRecord]) -> dict[str, User]:
        """
        Build the user directory from every row.

        Untitled rows still contribute their assignee, and an empty
        email yields a user keyed by the empty string.
        """
        users: dict[str, User] = {}
        for row in rows:
            email = row.get(Column.ASSIGNEE_EMAIL.value) or ""
            if email not in users:
                users[email] = User(name=email)
        return users

    def _map_issue(
        self, context: MapperContext, error_details: list[dict[str, Any]]
    ) -> Issue:
        """Run every field mapper over one titled row."""
        fields: dict[str, Any] = {}

        for mapper in self.mappers:
            try:
                fields[mapper.field_name] = mapper.map(context)
            except Exception as e:
                context.add_error(f"Mapper {mapper.field_name} failed: {e}")
                error_details.append(
                    {
                        "task_id": context.task_id,
                        "mapper": mapper.field_name,
                        "error": str(e),
                        "type": type(e).__name__,
                        "traceback": traceback.format_exc(),
                    }
                )
                logger.exception(f"Mapper {mapper.field_name} raised exception")
                fields[mapper.field_name] = mapper.fallback

        return Issue(title=context.title, **fields)

    def write_json(
        self,
        result: ConversionResult,
        output_path: Union[str, Path],
        indent: Optional[int] = 2,
        include_nulls: bool = False,
    ) -> Path:
        """
        Write the import document to a JSON file.

        Args:
            result: The ConversionResult to write
            output_path: Path to output file
            indent: JSON indentation level (None for compact)
            include_nulls: Whether to include null values

        Returns:
            Path to written file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(result.to_json(indent=indent, include_nulls=include_nulls))

        logger.info(f"Wrote import document to {output_path}")
        return output_path


def map_records(
    records: Iterable[SourceRecord],
    link_base: Optional[str] = None,
    markup_converter: MarkupConverter = to_target_markup,
) -> ImportDocument:
    """
    Convenience function returning only the ImportDocument.

    Args:
        records: Source rows in export order
        link_base: URL prefix for back-links, or None
        markup_converter: Function converting notes markup

    Returns:
        The mapped ImportDocument
    """
    mapper = RecordMapper(link_base=link_base, markup_converter=markup_converter)
    return mapper.map(records).document
