"""Horse repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.models import Horse, HorseStatus, Lifecycle
from poloclub.repositories.base import LifecycleRepository


class HorseRepository(LifecycleRepository[Horse]):
    """Repository for Horse model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Horse, session)

    async def get_available(self) -> list[Horse]:
        """Active horses that can be offered for work, by name."""
        return await self.get_active(filters={"status": HorseStatus.AVAILABLE.value})

    async def search_by_name(self, name: str, limit: int = 20) -> list[Horse]:
        """Search active horses by name."""
        query = (
            select(Horse)
            .where(Horse.lifecycle == Lifecycle.ACTIVE.value, Horse.name.contains(name))
            .order_by(Horse.name)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def status_counts(self) -> dict[str, int]:
        """Number of active horses per status."""
        result = await self.session.execute(
            select(Horse.status, func.count())
            .where(Horse.lifecycle == Lifecycle.ACTIVE.value)
            .group_by(Horse.status)
        )
        counts = {status.value: 0 for status in HorseStatus}
        counts.update({status: count for status, count in result.all()})
        return counts
