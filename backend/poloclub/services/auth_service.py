"""Sign-up and sign-in."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.auth import (
    CurrentUser,
    Role,
    RoleResolver,
    create_access_token,
    get_role_resolver,
    hash_password,
    verify_password,
)
from poloclub.exceptions import AuthenticationError, ConflictError, NotFoundError
from poloclub.models import User
from poloclub.repositories import PlayerRepository, UserRepository
from poloclub.schemas import SignInRequest, SignUpRequest, TokenResponse, UserResponse


class AuthService:
    """Service for account creation and token issue."""

    def __init__(self, session: AsyncSession, resolver: RoleResolver | None = None):
        self.session = session
        self.resolver = resolver or get_role_resolver()
        self.user_repo = UserRepository(session)
        self.player_repo = PlayerRepository(session)

    async def sign_up(self, data: SignUpRequest) -> TokenResponse:
        email = data.email.strip().lower()
        if await self.user_repo.get_by_email(email) is not None:
            raise ConflictError("An account with this e-mail already exists")
        if data.player_id is not None:
            if await self.player_repo.get(data.player_id) is None:
                raise NotFoundError("Player", data.player_id)
            if await self.user_repo.get_by_player(data.player_id) is not None:
                raise ConflictError("This player already has an account")

        user = await self.user_repo.create(
            {
                "email": email,
                "password_hash": hash_password(data.password),
                "player_id": data.player_id,
            }
        )
        logger.info(f"User signed up: id={user.id}")
        return self._token(user)

    async def sign_in(self, data: SignInRequest) -> TokenResponse:
        user = await self.user_repo.get_by_email(data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            logger.warning("Failed sign-in attempt")
            raise AuthenticationError("Invalid email or password")
        return self._token(user)

    def describe(self, user: CurrentUser) -> UserResponse:
        return UserResponse(
            id=user.id,
            email=user.email,
            player_id=user.player_id,
            roles=sorted(role.value for role in user.roles),
            is_admin=user.is_admin,
        )

    def _token(self, user: User) -> TokenResponse:
        roles = self.resolver(user.email)
        return TokenResponse(
            access_token=create_access_token(user.id, user.email),
            is_admin=Role.ADMIN in roles,
        )
