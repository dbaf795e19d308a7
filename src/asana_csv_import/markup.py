"""
Rich-text conversion for task notes.

Asana notes exported through Jira-compatible tooling use wiki markup;
the destination renders Markdown.
"""

from typing import Callable

from jira2markdown import convert

# Signature every markup converter passed to RecordMapper must follow
MarkupConverter = Callable[[str], str]


def to_target_markup(source: str) -> str:
    """Convert Jira wiki markup to Markdown."""
    if not source:
        return ""
    return convert(source)


def identity_markup(source: str) -> str:
    """Pass notes through unchanged."""
    return source
