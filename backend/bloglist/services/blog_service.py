"""Blog Service: list, read, create, delete and like-update blogs.

Invariants:
    - Follows read -> pure check -> write: every mutation first runs a core/ check
    - create_blog writes the blog and the owner's collection in one commit
    - update_likes touches only the likes column
    - Not-found and forbidden are distinct outcomes (404 vs 403)
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.core.authorization import (
    raise_for_access, require_identity,
    resolve_delete_access, resolve_likes_access,
)
from bloglist.core.blog_stats import summarize_blogs
from bloglist.core.domain_types import BlogId, LikesUpdatePolicy, UserId
from bloglist.core.errors import AuthenticationError, ResourceNotFoundError
from bloglist.core.validation import check_blog_draft
from bloglist.models.blog import Blog
from bloglist.models.user import User

logger = logging.getLogger(__name__)


class BlogService:
    """Blog persistence around the pure checks in core/."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find(self, blog_id: UUID) -> Blog | None:
        result = await self.db.execute(
            select(Blog).where(Blog.id == blog_id),
        )
        return result.scalar_one_or_none()

    async def list_blogs(self) -> list[Blog]:
        """All blogs, owners resolved, oldest first."""
        result = await self.db.execute(
            select(Blog).order_by(Blog.created_at),
        )
        return list(result.scalars().all())

    async def get_blog(self, blog_id: BlogId) -> Blog:
        blog = await self._find(blog_id)
        if blog is None:
            raise ResourceNotFoundError("Blog", str(blog_id))
        return blog

    async def create_blog(self, draft: dict, user_id: UserId) -> Blog:
        """Validate, then persist the blog owned by user_id."""
        check_blog_draft(draft)

        owner = await self.db.get(User, user_id)
        if owner is None:
            # Signed token for an account that no longer exists
            raise AuthenticationError("token user not found")

        blog = Blog(
            title=draft["title"],
            author=draft.get("author"),
            url=draft["url"],
            likes=draft.get("likes") or 0,
            user_id=owner.id,
        )
        owner.blogs.append(blog)
        self.db.add(blog)
        await self.db.commit()

        logger.info(
            f"Blog '{blog.title}' created",
            extra={"blog_id": blog.id, "user_id": owner.id},
        )
        return blog

    async def delete_blog(self, blog_id: BlogId, user_id: UserId) -> None:
        """Owner-only delete."""
        blog = await self._find(blog_id)
        access = resolve_delete_access(blog, user_id)
        if not access.allowed:
            logger.warning(
                f"Blog delete refused: {access.outcome.value}",
                extra={"blog_id": blog_id, "user_id": user_id},
            )
        blog = raise_for_access(access, blog_id, "delete")

        await self.db.delete(blog)
        await self.db.commit()
        logger.info("Blog deleted", extra={"blog_id": blog_id, "user_id": user_id})

    async def update_likes(
        self,
        blog_id: BlogId,
        likes: int,
        user_id: UserId | None,
        policy: LikesUpdatePolicy,
    ) -> Blog:
        """Set likes under the configured policy and return the blog."""
        require_identity(user_id, policy)
        blog = await self._find(blog_id)
        blog = raise_for_access(
            resolve_likes_access(blog, user_id, policy), blog_id, "update",
        )

        blog.likes = likes
        await self.db.commit()
        return blog

    async def compute_stats(self) -> dict:
        """Aggregate statistics over every stored blog."""
        return summarize_blogs(await self.list_blogs())
