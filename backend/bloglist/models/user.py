"""User ORM: an account that owns blogs.

Invariants:
    - username is unique and non-nullable
    - password_hash is the only stored form of the password
    - blogs lists the user's own blogs in creation order
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from bloglist.core.domain_types import NAME_MAX_LENGTH, USERNAME_MAX_LENGTH
from bloglist.db.base import Base


class User(Base):
    """Account holder; creates blogs and may delete only their own."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False, unique=True, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(NAME_MAX_LENGTH), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    blogs: Mapped[list["Blog"]] = relationship(
        "Blog", back_populates="user", lazy="selectin",
        order_by="Blog.created_at",
    )
