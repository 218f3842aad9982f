"""User Routes: signup and listing.

Invariants:
    - POST /api/users returns 201 with the user (never the password hash)
    - Validation failures are 400 with the message under "error"
"""

from fastapi import APIRouter, status

from bloglist.api.dependencies import AppSettings, DbSession
from bloglist.schemas.user import UserCreate, UserResponse
from bloglist.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: DbSession, settings: AppSettings):
    user = await UserService(db).signup(body, settings)
    return UserResponse.model_validate(user)


@router.get("", response_model=list[UserResponse])
async def list_users(db: DbSession):
    """All users with their blogs."""
    users = await UserService(db).list_users()
    return [UserResponse.model_validate(u) for u in users]
