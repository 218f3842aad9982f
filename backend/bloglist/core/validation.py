"""Input Validation: field rules for blog drafts and signups.

Invariants:
    - Checks run in a fixed order; the first failure wins
    - Signup messages are part of the client contract and must not change
    - Whitespace-only values count as missing
"""

from bloglist.core.errors import BlogDraftError, FieldValidationError


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_blog_draft(draft: dict) -> None:
    """A blog needs a non-empty title and url."""
    for name in ("title", "url"):
        if _is_blank(draft.get(name)):
            raise BlogDraftError(name, draft)


def check_signup(
    username: str | None,
    password: str | None,
    min_username: int = 3,
    min_password: int = 3,
) -> None:
    """Validate signup fields. Uniqueness is checked against the store later."""
    if _is_blank(username):
        raise FieldValidationError("username must be defined", "username")
    if _is_blank(password):
        raise FieldValidationError("password must be defined", "password")
    if len(username) < min_username:
        raise FieldValidationError(
            f"username must be atleat {min_username} characters long",
            "username",
        )
    if len(password) < min_password:
        raise FieldValidationError(
            f"password must be atleast {min_password} characters long",
            "password",
        )
