# =============================================================================
# core/user_profile.py  —  Sample User Profile & Todo List
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Serves the two zero-argument demo tools: the current user's profile and
#   their todo list.
#
# WHY MOCK DATA?
#   In a real system, this would hit a database or user service.  For this
#   demo, we use hardcoded values.  But notice: the INTERFACE is clean
#   (get_profile() -> UserProfile, get_todos() -> list[TodoItem]).  Swapping
#   in a real store later requires changing only this module.
#
# IDEMPOTENCY:
#   Both functions are pure reads and hand out fresh objects on every call,
#   so a caller mutating a result can't corrupt the next response.
# =============================================================================

import json
from dataclasses import asdict

from core.models import TodoItem, UserProfile


def get_profile() -> UserProfile:
    """Return the sample user's profile."""
    return UserProfile(
        name="Sample User",
        email="user@example.com",
        preferences={
            "theme": "dark",
            "notifications": True,
        },
    )


def get_todos() -> list[TodoItem]:
    """Return the sample todo list, in display order."""
    return [
        TodoItem(id=1, title="Finish project", completed=False),
        TodoItem(id=2, title="Buy groceries", completed=True),
        TodoItem(id=3, title="Call dentist", completed=False),
        TodoItem(id=4, title="Prepare presentation", completed=False),
    ]


def to_pretty_json(value) -> str:
    """Serialize a dataclass (or list of them) as 2-space indented JSON.

    ensure_ascii=False keeps non-ASCII text readable instead of \\u-escaped.
    """
    if isinstance(value, list):
        value = [asdict(v) for v in value]
    else:
        value = asdict(value)
    return json.dumps(value, indent=2, ensure_ascii=False)
