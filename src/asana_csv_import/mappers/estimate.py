"""
Estimate mapper.

Parses the free-text Asana "Effort" column into an integer estimate.
"""

import re
from typing import Optional

from ..constants import Column
from .base import Mapper, MapperContext

# Leading integer, as in "3", " 5 pts" or "8h"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def parse_estimate(value: str) -> Optional[int]:
    """
    Parse the leading integer of an effort value.

    Returns None when there is no leading integer or when it is not
    positive; an unestimated task has no estimate rather than zero.
    """
    match = _LEADING_INT.match(value)
    if not match:
        return None

    try:
        estimate = int(match.group(1))
    except ValueError:
        # Past the interpreter's integer string conversion limit
        return None
    return estimate if estimate > 0 else None


class EstimateMapper(Mapper):
    """Maps "Effort" to a positive integer estimate."""

    @property
    def field_name(self) -> str:
        return "estimate"

    def map(self, context: MapperContext) -> Optional[int]:
        return parse_estimate(context.value(Column.EFFORT))
