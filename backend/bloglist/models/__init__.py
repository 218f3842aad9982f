"""ORM Models: SQLAlchemy declarative models for users and blogs.

Invariants:
    - All models inherit from Base (db/base.py)
    - A Blog's owner is the User who created it (blogs.user_id)

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from bloglist.models.user import User  # noqa: F401
from bloglist.models.blog import Blog  # noqa: F401
