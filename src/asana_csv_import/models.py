"""
Import document model.

The entities handed to the destination importer. They are plain
dataclasses built once per conversion; ``to_dict`` renders them with
the camelCase keys the destination expects.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True)
class User:
    """A destination user, keyed by assignee email in ImportDocument.users."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class Label:
    """A destination label, keyed by its own name in ImportDocument.labels."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class Issue:
    """
    One issue derived from a titled Asana task.

    Attributes:
        title: Task name, never empty
        description: Markdown description, with back-link when available
        status: Destination workflow state name
        priority: Destination priority weight (0 = no priority)
        url: Link to the task in Asana
        assignee_id: Key into ImportDocument.users
        labels: Label names in source order, repeats preserved
        due_date: Parsed "Due Date"
        estimate: Positive effort estimate
    """

    title: str
    description: str
    status: str
    priority: int
    url: Optional[str] = None
    assignee_id: Optional[str] = None
    labels: tuple[str, ...] = ()
    due_date: Optional[date] = None
    estimate: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "url": self.url,
            "assigneeId": self.assignee_id,
            "labels": list(self.labels),
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "estimate": self.estimate,
        }


@dataclass
class ImportDocument:
    """
    Result of mapping an Asana export.

    ``statuses`` is part of the destination format but nothing in an
    Asana export populates it.
    """

    issues: list[Issue] = field(default_factory=list)
    users: dict[str, User] = field(default_factory=dict)
    labels: dict[str, Label] = field(default_factory=dict)
    statuses: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "issues": [issue.to_dict() for issue in self.issues],
            "labels": {key: label.to_dict() for key, label in self.labels.items()},
            "users": {key: user.to_dict() for key, user in self.users.items()},
            "statuses": dict(self.statuses),
        }
