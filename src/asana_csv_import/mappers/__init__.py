"""
Mappers for converting Asana CSV rows to destination issue fields.

Each mapper derives one field of an Issue from a single source row.
"""

from .assignee import AssigneeMapper
from .base import Mapper, MapperContext, SourceRecord
from .description import DescriptionMapper
from .due_date import DueDateMapper
from .estimate import EstimateMapper, parse_estimate
from .labels import LabelsMapper, split_tags
from .link import LinkMapper
from .priority import PriorityMapper, map_priority
from .status import CompletionStatusMapper, SectionStatusMapper, map_status

__all__ = [
    "Mapper",
    "MapperContext",
    "SourceRecord",
    # Link must run before description
    "LinkMapper",
    "DescriptionMapper",
    # Controlled vocabularies
    "PriorityMapper",
    "SectionStatusMapper",
    "CompletionStatusMapper",
    # Free-form fields
    "DueDateMapper",
    "EstimateMapper",
    "LabelsMapper",
    "AssigneeMapper",
    # Helpers
    "map_priority",
    "map_status",
    "parse_estimate",
    "split_tags",
]
