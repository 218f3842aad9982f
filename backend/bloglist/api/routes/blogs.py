"""Blog Routes: /api/blogs CRUD plus on-demand statistics.

Invariants:
    - POST and DELETE require a bearer token (401 otherwise)
    - PUT authorization follows settings.likes_update_policy (open by default)
    - GET of an unknown id is 404; DELETE of someone else's blog is 403
    - /stats is declared before /{blog_id} so it is never parsed as an id
"""

import logging
from uuid import UUID

from fastapi import APIRouter, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from bloglist.api.dependencies import (
    AppSettings, CurrentUserId, DbSession, OptionalUserId,
)
from bloglist.core.domain_types import BlogId
from bloglist.core.errors import BlogDraftError
from bloglist.schemas.blog import (
    BlogCreate, BlogLikesUpdate, BlogResponse, BlogStatsResponse,
)
from bloglist.services.blog_service import BlogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=list[BlogResponse])
async def list_blogs(db: DbSession):
    """All blogs with the owner's username attached."""
    blogs = await BlogService(db).list_blogs()
    return [BlogResponse.model_validate(b) for b in blogs]


@router.get("/stats", response_model=BlogStatsResponse)
async def blog_stats(db: DbSession):
    """Total likes, favorite blog and top authors over all blogs."""
    return await BlogService(db).compute_stats()


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: UUID, db: DbSession):
    blog = await BlogService(db).get_blog(BlogId(blog_id))
    return BlogResponse.model_validate(blog)


@router.post(
    "", response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    body: BlogCreate,
    user_id: CurrentUserId,
    db: DbSession,
    settings: AppSettings,
):
    """Create a blog owned by the caller."""
    draft = body.model_dump()
    try:
        blog = await BlogService(db).create_blog(draft, user_id)
    except BlogDraftError as e:
        if not settings.echo_invalid_blog_draft:
            raise
        logger.info(f"Echoing rejected blog draft: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(e.draft),
        )
    return BlogResponse.model_validate(blog)


@router.delete("/{blog_id}", status_code=status.HTTP_200_OK)
async def delete_blog(blog_id: UUID, user_id: CurrentUserId, db: DbSession):
    """Delete a blog; only its owner may."""
    await BlogService(db).delete_blog(BlogId(blog_id), user_id)
    return Response(status_code=status.HTTP_200_OK)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_likes(
    blog_id: UUID,
    body: BlogLikesUpdate,
    user_id: OptionalUserId,
    db: DbSession,
    settings: AppSettings,
):
    """Replace a blog's like count."""
    blog = await BlogService(db).update_likes(
        BlogId(blog_id), body.likes, user_id, settings.likes_update_policy,
    )
    return BlogResponse.model_validate(blog)
