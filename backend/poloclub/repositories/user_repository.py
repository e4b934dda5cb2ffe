"""User repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.models import User
from poloclub.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> User | None:
        """Get user by e-mail (case-insensitive)."""
        result = await self.session.execute(
            select(User).where(User.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def get_by_player(self, player_id: int) -> User | None:
        """Get the account linked to a player."""
        result = await self.session.execute(select(User).where(User.player_id == player_id))
        return result.scalar_one_or_none()
