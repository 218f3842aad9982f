"""Domain Types: identity wrappers and enums shared across the codebase.

Invariants:
    - UserId, BlogId wrap UUIDs
    - All valid policy/outcome states encoded as Enums, no raw string matching
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
BlogId = NewType("BlogId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class LikesUpdatePolicy(str, Enum):
    """Who may change a blog's like count via PUT /api/blogs/{id}."""
    OPEN = "open"
    AUTHENTICATED = "authenticated"
    OWNER = "owner"


class AccessOutcome(str, Enum):
    """Result tag for a lookup followed by an authorization check."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


# ─── Column Limits ───────────────────────────────────────────────
# Shared by the ORM columns and the request schemas so oversize input is a 400

USERNAME_MAX_LENGTH = 64
NAME_MAX_LENGTH = 200
TITLE_MAX_LENGTH = 500
AUTHOR_MAX_LENGTH = 200
LIKES_MAX = 2**31 - 1
