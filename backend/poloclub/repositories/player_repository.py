"""Player repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.models import Lifecycle, Player
from poloclub.repositories.base import LifecycleRepository


class PlayerRepository(LifecycleRepository[Player]):
    """Repository for Player model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Player, session)

    async def search_by_name(self, name: str, limit: int = 20) -> list[Player]:
        """Search active players by name."""
        query = (
            select(Player)
            .where(Player.lifecycle == Lifecycle.ACTIVE.value, Player.name.contains(name))
            .order_by(Player.name)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
