"""User Schemas: signup, login and public user projections.

Invariants:
    - UserCreate fields are optional so missing values reach core.validation
      and produce the contract error messages instead of generic 400s
    - UserResponse never includes the password hash
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bloglist.core.domain_types import NAME_MAX_LENGTH, USERNAME_MAX_LENGTH
from bloglist.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """Signup payload."""
    username: str | None = Field(None, max_length=USERNAME_MAX_LENGTH)
    name: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    password: str | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = []


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    token: str
    username: str
    name: str | None = None
