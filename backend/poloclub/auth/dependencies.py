"""FastAPI dependencies for bearer-token auth."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.auth.roles import CurrentUser, RoleResolver, get_role_resolver
from poloclub.auth.tokens import decode_access_token
from poloclub.database import get_db
from poloclub.exceptions import AuthenticationError
from poloclub.repositories import UserRepository

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


async def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
    resolver: RoleResolver = Depends(get_role_resolver),
) -> CurrentUser:
    """Resolve the bearer token to a signed-in user.

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired or
            belongs to a deleted account
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=_UNAUTHORIZED_HEADERS,
        )

    try:
        user_id = decode_access_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers=_UNAUTHORIZED_HEADERS,
        ) from e

    user = await UserRepository(db).get(user_id)
    if user is None:
        logger.warning(f"Token for unknown user id={user_id}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers=_UNAUTHORIZED_HEADERS,
        )

    return CurrentUser(
        id=user.id,
        email=user.email,
        player_id=user.player_id,
        roles=frozenset(resolver(user.email)),
    )


async def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Allow administrators only."""
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user
