"""Practice repository."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.models import Practice, PracticeStatus
from poloclub.repositories.base import BaseRepository


class PracticeRepository(BaseRepository[Practice]):
    """Repository for Practice model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Practice, session)

    async def get_latest(
        self,
        skip: int = 0,
        limit: int = 100,
        status: str | None = None,
    ) -> list[Practice]:
        """Practices, most recent date first."""
        query = select(Practice)
        if status:
            query = query.where(Practice.status == status)

        query = query.order_by(Practice.date.desc(), Practice.id.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_upcoming(self, today: date | None = None, limit: int = 50) -> list[Practice]:
        """Planned or in-progress practices from today on, soonest first."""
        today = today or date.today()
        query = (
            select(Practice)
            .where(
                Practice.status.in_(
                    [PracticeStatus.PLANNED.value, PracticeStatus.IN_PROGRESS.value]
                ),
                Practice.date >= today,
            )
            .order_by(Practice.date, Practice.id)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
