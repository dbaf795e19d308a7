"""
Back-link mapper.

Builds the URL of the original task in Asana.
"""

from typing import Optional

from .base import Mapper, MapperContext


class LinkMapper(Mapper):
    """
    Maps the task id to a link back to Asana.

    Source fields:
    - Task ID -> url

    The link is ``link_base + task_id`` with no separator added; callers
    supply a base that already ends in one (e.g.
    ``https://app.asana.com/0/1204417431012397/``). Without a link base
    no url is produced.

    The computed link is stored on the context for DescriptionMapper.
    """

    @property
    def field_name(self) -> str:
        return "url"

    def map(self, context: MapperContext) -> Optional[str]:
        if not context.link_base:
            context.url = None
            return None

        context.url = f"{context.link_base}{context.task_id}"
        return context.url
