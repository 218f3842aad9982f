"""Request Identity: bearer-token extraction for protected routes.

Invariants:
    - get_current_user_id raises AuthenticationError (401) when the Authorization
      header is absent, blank, not a Bearer credential, or fails verification
    - get_optional_user_id never raises: an absent or invalid credential is None,
      leaving the caller to decide whether anonymity is acceptable
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.config import Settings, get_settings
from bloglist.core.domain_types import UserId
from bloglist.core.errors import AuthenticationError
from bloglist.infrastructure.database import get_db
from bloglist.infrastructure.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _decode(credentials: HTTPAuthorizationCredentials, settings: Settings) -> UserId:
    return decode_access_token(
        credentials.credentials,
        secret_key=settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> UserId:
    if credentials is None:
        raise AuthenticationError("token missing")
    return _decode(credentials, settings)


async def get_optional_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> UserId | None:
    if credentials is None:
        return None
    try:
        return _decode(credentials, settings)
    except AuthenticationError:
        return None


# Type annotations for dependency injection
CurrentUserId = Annotated[UserId, Depends(get_current_user_id)]
OptionalUserId = Annotated[UserId | None, Depends(get_optional_user_id)]
AppSettings = Annotated[Settings, Depends(get_settings)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
