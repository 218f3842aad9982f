"""Blog Stats: pure aggregation over a collection of blog records.

Invariants:
    - No IO, no DB, no async; same input always yields the same output
    - Records may be mappings or objects (ORM rows) exposing author/title/likes
    - A missing or None likes value counts as 0
    - Ties resolve to first appearance: the earliest blog for favorite_blog,
      the author whose first blog appears earliest for most_blogs/most_likes
    - Empty input never raises: favorite_blog -> 0, most_* -> None
"""

from collections.abc import Iterable, Mapping
from typing import Any

FAVORITE_FIELDS = ("title", "author", "likes")


def _field(blog: Any, name: str, default: Any = None) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def total_likes(blogs: Iterable[Any]) -> int:
    """Sum of likes across all blogs."""
    return sum(_likes(b) for b in blogs)


def favorite_blog(blogs: Iterable[Any]) -> dict | int:
    """Blog with the most likes, projected to title/author/likes.

    Left-to-right reduction: the first blog is the initial candidate and only
    a strictly greater like count replaces it. Returns 0 for no blogs.
    """
    best = None
    for blog in blogs:
        if best is None or _likes(blog) > _likes(best):
            best = blog
    if best is None:
        return 0
    projected = {name: _field(best, name) for name in FAVORITE_FIELDS}
    projected["likes"] = _likes(best)
    return projected


def _group_by_author(blogs: Iterable[Any]) -> dict[Any, list[Any]]:
    # dict keeps insertion order, which is first-appearance order of authors
    groups: dict[Any, list[Any]] = {}
    for blog in blogs:
        groups.setdefault(_field(blog, "author"), []).append(blog)
    return groups


def _top_author(totals: dict[Any, int]) -> tuple[Any, int] | None:
    if not totals:
        return None
    # max() keeps the first maximal item, so earlier authors win ties
    return max(totals.items(), key=lambda item: item[1])


def most_blogs(blogs: Iterable[Any]) -> dict | None:
    """Author with the most blogs as {author, blogs}."""
    counts = {
        author: len(group)
        for author, group in _group_by_author(blogs).items()
    }
    top = _top_author(counts)
    if top is None:
        return None
    return {"author": top[0], "blogs": top[1]}


def most_likes(blogs: Iterable[Any]) -> dict | None:
    """Author whose blogs have the most likes combined as {author, likes}."""
    sums = {
        author: total_likes(group)
        for author, group in _group_by_author(blogs).items()
    }
    top = _top_author(sums)
    if top is None:
        return None
    return {"author": top[0], "likes": top[1]}


def summarize_blogs(blogs: Iterable[Any]) -> dict:
    """All aggregates in one dict, for the stats endpoint."""
    blogs = list(blogs)
    return {
        "blog_count": len(blogs),
        "total_likes": total_likes(blogs),
        "favorite_blog": favorite_blog(blogs),
        "most_blogs": most_blogs(blogs),
        "most_likes": most_likes(blogs),
    }
