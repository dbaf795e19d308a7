"""
Description mapper.

Converts task notes to the destination markup and appends the back-link.
"""

import logging

from ..constants import ORIGINAL_LINK_TEXT, Column
from .base import Mapper, MapperContext

logger = logging.getLogger(__name__)


class DescriptionMapper(Mapper):
    """
    Maps Asana notes to the issue description.

    Source fields:
    - Notes -> description (through the context's markup converter)
    - url (from LinkMapper) -> trailing "[View original issue in Asana](url)"

    If the markup converter fails, the raw notes are used instead and an
    error is recorded; the back-link is appended either way.

    Must run after LinkMapper.
    """

    @property
    def field_name(self) -> str:
        return "description"

    @property
    def fallback(self) -> str:
        return ""

    def map(self, context: MapperContext) -> str:
        notes = context.value(Column.NOTES)

        try:
            description = context.markup_converter(notes)
        except Exception as e:
            context.add_error(f"Markup conversion failed, notes kept as-is: {e}")
            logger.exception("Markup converter raised exception")
            description = notes

        if context.url:
            return f"{description}\n\n[{ORIGINAL_LINK_TEXT}]({context.url})"
        return description
