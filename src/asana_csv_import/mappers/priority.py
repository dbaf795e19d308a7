"""
Priority mapper.

Translates Asana priority ranks to destination priority weights.
"""

from ..constants import NO_PRIORITY, PRIORITY_WEIGHTS, AsanaPriority, Column
from .base import Mapper, MapperContext


def map_priority(value: str) -> int:
    """
    Translate an Asana priority rank to a destination weight.

    High -> 2, Medium -> 3, Low -> 4; anything else -> 0.
    """
    try:
        rank = AsanaPriority(value)
    except ValueError:
        return NO_PRIORITY
    return PRIORITY_WEIGHTS[rank]


class PriorityMapper(Mapper):
    """
    Maps "Priority Rank" to the issue priority weight.

    Unknown and empty ranks map to 0 (no priority) without a warning;
    most Asana projects leave the column blank.
    """

    @property
    def field_name(self) -> str:
        return "priority"

    @property
    def fallback(self) -> int:
        return NO_PRIORITY

    def map(self, context: MapperContext) -> int:
        return map_priority(context.value(Column.PRIORITY_RANK))
