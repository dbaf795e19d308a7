"""
Due date mapper.

Parses the Asana "Due Date" column.
"""

from datetime import date, datetime
from typing import Optional

from ..constants import Column
from .base import Mapper, MapperContext


class DueDateMapper(Mapper):
    """
    Maps "Due Date" to a date.

    Asana writes plain ISO dates (``2024-03-15``); full ISO timestamps
    are accepted and truncated to their date. A non-empty value is
    always parsed. Values that do not parse leave the due date unset
    and add a warning.
    """

    @property
    def field_name(self) -> str:
        return "due_date"

    def map(self, context: MapperContext) -> Optional[date]:
        raw = context.value(Column.DUE_DATE)
        if not raw:
            return None

        parsed = self._parse_date(raw.strip())
        if parsed is None:
            context.add_warning(f"Unparseable due date '{raw}', leaving it unset")
        return parsed

    def _parse_date(self, value: str) -> Optional[date]:
        """Parse an ISO date or datetime string."""
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass

        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return None
