"""
Base mapper class and context for Asana record conversion.

Provides the abstract interface that all field mappers implement,
along with the per-record context they share.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from ..constants import Column
from ..markup import MarkupConverter, to_target_markup

# One row of an Asana CSV export
SourceRecord = Mapping[str, Optional[str]]


@dataclass
class MapperContext:
    """
    Context passed between field mappers while building one issue.

    Attributes:
        record: The source row being mapped
        link_base: Prefix for back-links, or None to omit them
        markup_converter: Converts notes to the destination markup
        url: Back-link computed by LinkMapper, consumed by DescriptionMapper
        warnings: Non-fatal issues encountered while mapping this row
        errors: Mapper failures for this row
    """

    record: SourceRecord
    link_base: Optional[str] = None
    markup_converter: MarkupConverter = to_target_markup
    url: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def value(self, column: Column) -> str:
        """Cell value for a column; missing cells read as empty string."""
        return self.record.get(column.value) or ""

    @property
    def task_id(self) -> str:
        return self.value(Column.TASK_ID)

    @property
    def title(self) -> str:
        return self.value(Column.NAME)

    def add_warning(self, message: str) -> None:
        """Add a warning message to the context."""
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add an error message to the context."""
        self.errors.append(message)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Mapper(ABC):
    """
    Abstract base class for issue field mappers.

    Each mapper derives one Issue field from the source row held in
    the context.

    Subclasses must implement:
    - field_name: The Issue attribute this mapper fills
    - map(): The conversion logic

    Subclasses may override ``fallback`` with the value used when the
    field cannot be derived.

    Example:
        class TitleMapper(Mapper):
            field_name = "title"

            def map(self, context: MapperContext) -> str:
                return context.title
    """

    @property
    @abstractmethod
    def field_name(self) -> str:
        """Name of the Issue attribute this mapper produces."""
        pass

    @property
    def fallback(self) -> Any:
        """Value used when the field cannot be derived."""
        return None

    @abstractmethod
    def map(self, context: MapperContext) -> Any:
        """
        Map data from the context to a single Issue field.

        Args:
            context: The shared MapperContext with the source row

        Returns:
            The field value. Mappers never raise for malformed cells;
            they return their fallback and may add a warning instead.
        """
        pass
