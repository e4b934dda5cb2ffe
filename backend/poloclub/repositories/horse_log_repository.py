"""Horse log repository."""

from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.models import HorseLog, LogType
from poloclub.repositories.base import BaseRepository


class HorseLogRepository(BaseRepository[HorseLog]):
    """Repository for HorseLog model."""

    def __init__(self, session: AsyncSession):
        super().__init__(HorseLog, session)

    async def get_by_horse(
        self, horse_id: int, skip: int = 0, limit: int = 30
    ) -> list[HorseLog]:
        """Logs for a horse, newest first."""
        result = await self.session.execute(
            select(HorseLog)
            .where(HorseLog.horse_id == horse_id)
            .order_by(HorseLog.created_at.desc(), HorseLog.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_by_horse(self, horse_id: int) -> int:
        return await self.count({"horse_id": horse_id})

    async def get_for_horse(self, horse_id: int, log_id: int) -> HorseLog | None:
        """Get a log entry only if it belongs to the horse."""
        result = await self.session.execute(
            select(HorseLog).where(HorseLog.id == log_id, HorseLog.horse_id == horse_id)
        )
        return result.scalar_one_or_none()

    async def get_workload_between(
        self, horse_id: int, start_date: date, end_date: date
    ) -> list[HorseLog]:
        """Workload entries dated within [start_date, end_date]."""
        result = await self.session.execute(
            select(HorseLog)
            .where(
                HorseLog.horse_id == horse_id,
                HorseLog.type == LogType.WORKLOAD.value,
                HorseLog.date >= start_date,
                HorseLog.date <= end_date,
            )
            .order_by(HorseLog.date)
        )
        return list(result.scalars().all())

    async def get_by_batch(self, batch_id: str) -> list[HorseLog]:
        """Logs written by one completion batch."""
        result = await self.session.execute(
            select(HorseLog).where(HorseLog.batch_id == batch_id).order_by(HorseLog.horse_id)
        )
        return list(result.scalars().all())

    async def delete_by_batch(self, batch_id: str, practice_id: int) -> int:
        """Remove logs of an earlier attempt of the same batch.

        Entries whose practice was deleted keep their batch id but lose the
        practice link, so they are never matched.
        """
        result = await self.session.execute(
            delete(HorseLog).where(
                HorseLog.batch_id == batch_id,
                HorseLog.practice_id == practice_id,
            )
        )
        return result.rowcount or 0

    async def add_all(self, logs: list[HorseLog]) -> list[HorseLog]:
        """Insert several entries in a single flush."""
        self.session.add_all(logs)
        await self.flush()
        for log in logs:
            await self.session.refresh(log)
        return logs
