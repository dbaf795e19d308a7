"""
Assignee mapper.

Links an issue to its entry in the user directory.
"""

from typing import Optional

from ..constants import Column
from .base import Mapper, MapperContext


class AssigneeMapper(Mapper):
    """
    Maps "Assignee Email" to the issue's assignee id.

    Users are keyed by email, so the id is the email itself. Unassigned
    tasks have no assignee id.
    """

    @property
    def field_name(self) -> str:
        return "assignee_id"

    def map(self, context: MapperContext) -> Optional[str]:
        email = context.value(Column.ASSIGNEE_EMAIL)
        return email or None
