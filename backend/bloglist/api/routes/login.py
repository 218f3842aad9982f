"""Login Route: exchanges username/password for a bearer token."""

from fastapi import APIRouter

from bloglist.api.dependencies import AppSettings, DbSession
from bloglist.schemas.user import LoginRequest, TokenResponse
from bloglist.services.user_service import UserService

router = APIRouter(prefix="/api/login", tags=["login"])


@router.post("", response_model=TokenResponse)
async def login(body: LoginRequest, db: DbSession, settings: AppSettings):
    return await UserService(db).login(body.username, body.password, settings)
