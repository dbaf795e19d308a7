"""
Status mappers.

Two strategies for deciding the destination workflow state:

- SectionStatusMapper uses the board column ("Section/Column")
- CompletionStatusMapper only looks at whether the task was completed
"""

from ..constants import (
    FALLBACK_STATUS,
    SWIMLANE_STATUSES,
    AsanaSwimlane,
    Column,
    IssueStatus,
)
from .base import Mapper, MapperContext


def map_status(value: str) -> str:
    """
    Translate an Asana board column to a destination status name.

    To Do -> Todo, In Progress -> In Progress, In Review -> In Review,
    In QA -> In Testing, Done -> Done; anything else, Blocked included,
    -> Backlog.
    """
    try:
        swimlane = AsanaSwimlane(value)
    except ValueError:
        return FALLBACK_STATUS.value
    return SWIMLANE_STATUSES.get(swimlane, FALLBACK_STATUS).value


class SectionStatusMapper(Mapper):
    """Maps "Section/Column" through the swimlane table."""

    @property
    def field_name(self) -> str:
        return "status"

    @property
    def fallback(self) -> str:
        return FALLBACK_STATUS.value

    def map(self, context: MapperContext) -> str:
        section = context.value(Column.SECTION)
        status = map_status(section)
        if section and status == FALLBACK_STATUS.value and section != AsanaSwimlane.BLOCKED.value:
            context.add_warning(f"Unknown section '{section}', using {status}")
        return status


class CompletionStatusMapper(Mapper):
    """Maps "Completed At": completed tasks are Done, everything else Todo."""

    @property
    def field_name(self) -> str:
        return "status"

    @property
    def fallback(self) -> str:
        return IssueStatus.TODO.value

    def map(self, context: MapperContext) -> str:
        if context.value(Column.COMPLETED_AT):
            return IssueStatus.DONE.value
        return IssueStatus.TODO.value
