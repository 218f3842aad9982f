"""Blog Authorization: decides whether a caller may mutate a blog.

Invariants:
    - Pure: receives the already-fetched blog (or None) and the caller identity
    - Ownership is compared on the string form of both ids
    - A blog with no owner can only be mutated under the open likes policy
    - raise_for_access is the only place outcomes turn into exceptions
"""

from dataclasses import dataclass
from typing import Any

from bloglist.core.domain_types import AccessOutcome, LikesUpdatePolicy
from bloglist.core.errors import (
    AuthenticationError, AuthorizationError, ResourceNotFoundError,
)


@dataclass(frozen=True)
class BlogAccess:
    """Tagged result: FOUND carries the blog, NOT_FOUND/FORBIDDEN do not."""
    outcome: AccessOutcome
    blog: Any = None

    @property
    def allowed(self) -> bool:
        return self.outcome is AccessOutcome.FOUND


def is_owner(blog: Any, user_id: Any) -> bool:
    owner_id = getattr(blog, "user_id", None)
    if owner_id is None or user_id is None:
        return False
    return str(owner_id) == str(user_id)


def resolve_delete_access(blog: Any, user_id: Any) -> BlogAccess:
    """Only the owner may delete a blog."""
    if blog is None:
        return BlogAccess(AccessOutcome.NOT_FOUND)
    if not is_owner(blog, user_id):
        return BlogAccess(AccessOutcome.FORBIDDEN)
    return BlogAccess(AccessOutcome.FOUND, blog)


def resolve_likes_access(
    blog: Any, user_id: Any, policy: LikesUpdatePolicy,
) -> BlogAccess:
    """Apply the configured likes policy.

    Under AUTHENTICATED/OWNER a missing identity is an authentication
    failure, not a FORBIDDEN outcome, so callers must pass through
    require_identity first.
    """
    if blog is None:
        return BlogAccess(AccessOutcome.NOT_FOUND)
    if policy is LikesUpdatePolicy.OWNER and not is_owner(blog, user_id):
        return BlogAccess(AccessOutcome.FORBIDDEN)
    return BlogAccess(AccessOutcome.FOUND, blog)


def require_identity(user_id: Any, policy: LikesUpdatePolicy) -> None:
    """Raise AuthenticationError when the policy needs a caller identity."""
    if policy is not LikesUpdatePolicy.OPEN and user_id is None:
        raise AuthenticationError()


def raise_for_access(access: BlogAccess, blog_id: Any, action: str = "modify") -> Any:
    """Return the blog for FOUND, raise the matching error otherwise."""
    if access.outcome is AccessOutcome.NOT_FOUND:
        raise ResourceNotFoundError("Blog", str(blog_id))
    if access.outcome is AccessOutcome.FORBIDDEN:
        raise AuthorizationError(f"you are not allowed to {action} this blog")
    return access.blog
