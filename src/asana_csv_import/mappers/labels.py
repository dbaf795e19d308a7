"""
Labels mapper.

Splits the comma-joined Asana "Tags" column into label names.
"""

from ..constants import LABEL_SEPARATOR, Column
from .base import Mapper, MapperContext


def split_tags(value: str) -> tuple[str, ...]:
    """
    Split a comma-joined tag list.

    Empty fragments are dropped. Order and repeats are kept and
    fragments are not trimmed, so label names match Asana exactly.
    """
    return tuple(tag for tag in value.split(LABEL_SEPARATOR) if tag)


class LabelsMapper(Mapper):
    """Maps "Tags" to the issue's label names."""

    @property
    def field_name(self) -> str:
        return "labels"

    @property
    def fallback(self) -> tuple[str, ...]:
        return ()

    def map(self, context: MapperContext) -> tuple[str, ...]:
        return split_tags(context.value(Column.TAGS))
