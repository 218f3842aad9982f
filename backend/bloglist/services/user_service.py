"""User Service: signup, listing and login.

Invariants:
    - Signup order: field checks (core/validation) -> uniqueness -> hash -> insert
    - A unique-index violation on insert is still "username must be unique" (400)
    - Login never tells an unknown username apart from a wrong password
    - The raw password is hashed or verified and then dropped
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.config import Settings
from bloglist.core.errors import AuthenticationError, UsernameTakenError
from bloglist.core.validation import check_signup
from bloglist.infrastructure.security import (
    create_access_token, dummy_verify, hash_password, verify_password,
)
from bloglist.models.user import User
from bloglist.schemas.user import TokenResponse, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Account creation and credential checks."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def signup(self, payload: UserCreate, settings: Settings) -> User:
        check_signup(
            payload.username, payload.password,
            min_username=settings.username_min_length,
            min_password=settings.password_min_length,
        )
        if await self._find_by_username(payload.username) is not None:
            raise UsernameTakenError(payload.username)

        user = User(
            username=payload.username,
            name=payload.name,
            password_hash=hash_password(payload.password),
            blogs=[],
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent signup took the name between the lookup and the insert
            await self.db.rollback()
            raise UsernameTakenError(payload.username)

        logger.info("User created", extra={"user_id": user.id, "username": user.username})
        return user

    async def list_users(self) -> list[User]:
        result = await self.db.execute(
            select(User).order_by(User.created_at),
        )
        return list(result.scalars().all())

    async def login(
        self, username: str, password: str, settings: Settings,
    ) -> TokenResponse:
        user = await self._find_by_username(username)
        if user is None:
            dummy_verify()
            valid = False
        else:
            valid = verify_password(password, user.password_hash)
        if not valid:
            logger.info("Login rejected", extra={"username": username})
            raise AuthenticationError("invalid username or password")

        token = create_access_token(
            user.id, user.username,
            secret_key=settings.secret_key,
            algorithm=settings.jwt_algorithm,
            expires_minutes=settings.access_token_expire_minutes,
        )
        return TokenResponse(token=token, username=user.username, name=user.name)
