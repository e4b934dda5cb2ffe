"""Horse roster and workload ledger service."""

from datetime import date, timedelta

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.engine import workload_summary
from poloclub.engine.workload import WEEK_DAYS
from poloclub.exceptions import DomainValidationError, NotFoundError
from poloclub.models import Horse, HorseLog, HorseStatus, LogType
from poloclub.repositories import HorseLogRepository, HorseRepository
from poloclub.schemas import (
    HorseCreate,
    HorseLogCreate,
    HorseLogResponse,
    HorseResponse,
    HorseUpdate,
    WorkloadResponse,
)
from poloclub.services.change_feed import ChangeFeed, change_feed


class HorseService:
    """Service for horses and their activity logs."""

    def __init__(self, session: AsyncSession, feed: ChangeFeed | None = None):
        self.session = session
        self.feed = feed or change_feed
        self.horse_repo = HorseRepository(session)
        self.log_repo = HorseLogRepository(session)

    async def list_horses(
        self, status: HorseStatus | str | None = None
    ) -> tuple[list[HorseResponse], int, dict[str, int]]:
        """Active horses by name, with per-status counts for filtering."""
        filters = {"status": status} if status else None
        horses = await self.horse_repo.get_active(filters=filters)
        total = await self.horse_repo.count_active(filters)
        counts = await self.horse_repo.status_counts()
        return [HorseResponse.model_validate(h) for h in horses], total, counts

    async def get_horse(self, horse_id: int) -> Horse:
        """Get a horse, retired or not."""
        horse = await self.horse_repo.get(horse_id)
        if horse is None:
            raise NotFoundError("Horse", horse_id)
        return horse

    async def create_horse(self, data: HorseCreate) -> HorseResponse:
        horse = await self.horse_repo.create(data.model_dump())
        logger.info(f"Horse created: id={horse.id}, name={horse.name}")
        return self._publish(horse)

    async def update_horse(self, horse_id: int, data: HorseUpdate) -> HorseResponse:
        """Partial update. Status changes are unconstrained."""
        horse = await self.horse_repo.update(horse_id, data.model_dump(exclude_unset=True))
        if horse is None:
            raise NotFoundError("Horse", horse_id)
        return self._publish(horse)

    async def retire_horse(self, horse_id: int) -> HorseResponse:
        """Soft delete. Logs stay attached to the retired horse."""
        horse = await self.horse_repo.retire(horse_id)
        if horse is None:
            raise NotFoundError("Horse", horse_id)
        logger.info(f"Horse retired: id={horse.id}, name={horse.name}")
        return self._publish(horse)

    async def get_logs(
        self, horse_id: int, skip: int = 0, limit: int = 30
    ) -> tuple[list[HorseLogResponse], int]:
        """Most recent log entries for a horse."""
        await self.get_horse(horse_id)
        logs = await self.log_repo.get_by_horse(horse_id, skip=skip, limit=limit)
        total = await self.log_repo.count_by_horse(horse_id)
        return [HorseLogResponse.model_validate(log) for log in logs], total

    async def add_log(self, horse_id: int, data: HorseLogCreate) -> HorseLogResponse:
        """Manual log entry of any type."""
        await self.get_horse(horse_id)
        log = await self.log_repo.create({"horse_id": horse_id, **data.model_dump()})
        return self._publish_log(log)

    async def quick_workload(
        self, horse_id: int, chukkers: int, today: date | None = None
    ) -> HorseLogResponse:
        """Add +N chukkers of workload for today. Available horses only."""
        horse = await self.get_horse(horse_id)
        if not horse.is_active or horse.status != HorseStatus.AVAILABLE.value:
            raise DomainValidationError(f"{horse.name} is not available for work")

        log = await self.log_repo.create(
            {
                "horse_id": horse_id,
                "date": today or date.today(),
                "type": LogType.WORKLOAD.value,
                "chukkers_delta": chukkers,
                "note": "",
            }
        )
        return self._publish_log(log)

    async def delete_log(self, horse_id: int, log_id: int) -> None:
        log = await self.log_repo.get_for_horse(horse_id, log_id)
        if log is None:
            raise NotFoundError("Log entry", log_id)
        await self.log_repo.delete(log_id)
        self.feed.stage(self.session, f"horses/{horse_id}/logs/{log_id}", None)

    async def get_workload(self, horse_id: int, today: date | None = None) -> WorkloadResponse:
        """Today's and this week's workload, and whether the cap is reached."""
        horse = await self.get_horse(horse_id)
        today = today or date.today()
        logs = await self.log_repo.get_workload_between(
            horse_id, today - timedelta(days=WEEK_DAYS - 1), today
        )
        summary = workload_summary(horse, logs, today)
        if summary.overworked:
            logger.warning(
                f"Horse {horse.name} reached its cap: {summary.today}/{summary.max_chukkers_per_day}"
            )
        return WorkloadResponse(
            horse_id=horse_id,
            date=today,
            today=summary.today,
            week=summary.week,
            max_chukkers_per_day=summary.max_chukkers_per_day,
            overworked=summary.overworked,
        )

    def _publish(self, horse: Horse) -> HorseResponse:
        response = HorseResponse.model_validate(horse)
        self.feed.stage(self.session, f"horses/{horse.id}", response.model_dump(mode="json"))
        return response

    def _publish_log(self, log: HorseLog) -> HorseLogResponse:
        response = HorseLogResponse.model_validate(log)
        self.feed.stage(
            self.session,
            f"horses/{log.horse_id}/logs/{log.id}",
            response.model_dump(mode="json"),
        )
        return response
