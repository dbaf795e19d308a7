"""
Constants and enums for Asana CSV import.

Centralizes column names and controlled vocabularies so the mappers
never compare against magic strings.
"""

from enum import Enum
from types import MappingProxyType


class Column(str, Enum):
    """Column headers of an Asana CSV export."""

    TASK_ID = "Task ID"
    CREATED_AT = "Created At"
    COMPLETED_AT = "Completed At"
    LAST_MODIFIED = "Last Modified"
    NAME = "Name"
    ASSIGNEE = "Assignee"
    ASSIGNEE_EMAIL = "Assignee Email"
    START_DATE = "Start Date"
    DUE_DATE = "Due Date"
    TAGS = "Tags"
    NOTES = "Notes"
    PROJECTS = "Projects"
    SECTION = "Section/Column"
    EFFORT = "Effort"
    PARENT_TASK = "Parent Task"
    PRIORITY_RANK = "Priority Rank"


class AsanaPriority(str, Enum):
    """Asana "Priority Rank" values."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class AsanaSwimlane(str, Enum):
    """Asana "Section/Column" values."""

    TO_DO = "To Do"
    IN_PROGRESS = "In Progress"
    IN_REVIEW = "In Review"
    IN_QA = "In QA"
    BLOCKED = "Blocked"
    DONE = "Done"


class IssueStatus(str, Enum):
    """Workflow states understood by the destination tracker."""

    BACKLOG = "Backlog"
    TODO = "Todo"
    IN_PROGRESS = "In Progress"
    IN_REVIEW = "In Review"
    IN_TESTING = "In Testing"
    DONE = "Done"


class StatusSource(str, Enum):
    """Which source column decides an issue's status."""

    SECTION = "section"
    COMPLETION = "completion"


# Priority weight for anything outside AsanaPriority
NO_PRIORITY = 0

PRIORITY_WEIGHTS = MappingProxyType(
    {
        AsanaPriority.HIGH: 2,
        AsanaPriority.MEDIUM: 3,
        AsanaPriority.LOW: 4,
    }
)

# Blocked is deliberately absent and falls through to BACKLOG
SWIMLANE_STATUSES = MappingProxyType(
    {
        AsanaSwimlane.TO_DO: IssueStatus.TODO,
        AsanaSwimlane.IN_PROGRESS: IssueStatus.IN_PROGRESS,
        AsanaSwimlane.IN_REVIEW: IssueStatus.IN_REVIEW,
        AsanaSwimlane.IN_QA: IssueStatus.IN_TESTING,
        AsanaSwimlane.DONE: IssueStatus.DONE,
    }
)

FALLBACK_STATUS = IssueStatus.BACKLOG

# Back-link appended to converted descriptions
ORIGINAL_LINK_TEXT = "View original issue in Asana"

LABEL_SEPARATOR = ","

IMPORTER_NAME = "Asana (CSV)"
DEFAULT_TEAM_NAME = "Asana"

# Asana exports are written with a UTF-8 byte order mark
DEFAULT_ENCODING = "utf-8-sig"
