"""Blog Schemas: payloads and projections for /api/blogs.

Invariants:
    - BlogCreate leaves title/url optional; core.validation decides, so the
      rejected draft can be echoed back in legacy mode
    - likes is never negative and fits the 32-bit likes column
    - title and author lengths match their columns
    - BlogResponse.user is the owner projection {id, username} only
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bloglist.core.domain_types import AUTHOR_MAX_LENGTH, LIKES_MAX, TITLE_MAX_LENGTH


class BlogCreate(BaseModel):
    """Blog creation payload."""
    title: str | None = Field(None, max_length=TITLE_MAX_LENGTH)
    author: str | None = Field(None, max_length=AUTHOR_MAX_LENGTH)
    url: str | None = None
    likes: int | None = Field(None, ge=0, le=LIKES_MAX)


class BlogLikesUpdate(BaseModel):
    """Likes update payload; the only mutable field of a blog."""
    likes: int = Field(ge=0, le=LIKES_MAX)


class BlogOwner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str


class BlogResponse(BaseModel):
    """Public blog data with the owner resolved to a username."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = 0
    user: BlogOwner | None = None


class BlogSummary(BaseModel):
    """Blog without owner, nested under a user."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = 0


class FavoriteBlog(BaseModel):
    title: str
    author: str | None = None
    likes: int


class AuthorBlogCount(BaseModel):
    author: str | None = None
    blogs: int


class AuthorLikeCount(BaseModel):
    author: str | None = None
    likes: int


class BlogStatsResponse(BaseModel):
    """Aggregates over every stored blog. Empty store: favorite 0, authors None."""
    blog_count: int
    total_likes: int
    favorite_blog: FavoriteBlog | int
    most_blogs: AuthorBlogCount | None = None
    most_likes: AuthorLikeCount | None = None
