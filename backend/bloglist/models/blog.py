"""Blog ORM: a post with a title, url, likes and an owning user.

Invariants:
    - title and url are non-nullable
    - likes is never NULL (defaults to 0)
    - user_id is set at creation to the authenticated creator; seed rows may have none
"""

import uuid
from typing import Optional
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bloglist.core.domain_types import AUTHOR_MAX_LENGTH, TITLE_MAX_LENGTH
from bloglist.db.base import Base


class Blog(Base):
    """Blog entry."""
    __tablename__ = "blogs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    author: Mapped[str | None] = mapped_column(String(AUTHOR_MAX_LENGTH), nullable=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Owner projection source (username) for list/get responses
    user: Mapped[Optional["User"]] = relationship(
        "User", back_populates="blogs", lazy="selectin",
    )
