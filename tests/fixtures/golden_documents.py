"""
Expected import documents for known exports.
"""

from typing import Any

# create_full_record() mapped with LINK_BASE and identity markup
GOLDEN_DOCUMENT_FULL: dict[str, Any] = {
    "issues": [
        {
            "title": "Fix bug",
            "description": (
                "Crashes on save\n\n"
                "[View original issue in Asana](https://app.asana.com/0/1/123)"
            ),
            "status": "In Progress",
            "priority": 2,
            "url": "https://app.asana.com/0/1/123",
            "assigneeId": "a@x.com",
            "labels": ["bug", "urgent"],
            "dueDate": "2024-02-01",
            "estimate": 3,
        }
    ],
    "labels": {
        "bug": {"name": "bug"},
        "urgent": {"name": "urgent"},
    },
    "users": {
        "a@x.com": {"name": "a@x.com"},
    },
    "statuses": {},
}

# create_minimal_record() mapped without a link base
GOLDEN_DOCUMENT_MINIMAL: dict[str, Any] = {
    "issues": [
        {
            "title": "Minimal task",
            "description": "",
            "status": "Backlog",
            "priority": 0,
            "labels": [],
        }
    ],
    "labels": {},
    "users": {
        "": {"name": ""},
    },
    "statuses": {},
}
