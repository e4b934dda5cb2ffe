"""Practice lifecycle: start, and completion with its workload batch."""

from datetime import datetime, timezone

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.engine import horse_usage
from poloclub.exceptions import CompletionError, InvalidTransitionError, NotFoundError, WriteFailureError
from poloclub.models import HorseLog, LogType, Practice, PracticeStatus
from poloclub.repositories import HorseLogRepository, HorseRepository, PracticeRepository
from poloclub.schemas import Chukker, HorseLogResponse, PracticeResponse
from poloclub.services.change_feed import ChangeFeed, change_feed


def completion_batch_id(practice_id: int) -> str:
    """Batch id shared by every log one practice's completion writes."""
    return f"practice-{practice_id}-completion"


def completion_note(practice: Practice) -> str:
    return f"Practice: {practice.name}"


class CompletionService:
    """Drives a practice through planned -> in-progress -> completed.

    Completing writes one workload entry per horse used, carrying the number
    of chukkers the horse was down for, and flips the status in the same
    savepoint. If any entry fails the savepoint is rolled back, the practice
    stays in progress and completion can be retried. A retry first removes
    entries left by an earlier attempt with the same batch id, so a horse is
    never counted twice for one practice.
    """

    def __init__(self, session: AsyncSession, feed: ChangeFeed | None = None):
        self.session = session
        self.feed = feed or change_feed
        self.practice_repo = PracticeRepository(session)
        self.horse_repo = HorseRepository(session)
        self.log_repo = HorseLogRepository(session)

    async def _get_practice(self, practice_id: int) -> Practice:
        practice = await self.practice_repo.get(practice_id)
        if practice is None:
            raise NotFoundError("Practice", practice_id)
        return practice

    async def start(self, practice_id: int) -> PracticeResponse:
        """planned -> in-progress."""
        practice = await self._get_practice(practice_id)
        if practice.status != PracticeStatus.PLANNED.value:
            raise InvalidTransitionError(practice.status, PracticeStatus.IN_PROGRESS.value)

        practice = await self.practice_repo.update(
            practice_id, {"status": PracticeStatus.IN_PROGRESS.value}
        )
        logger.info(f"Practice {practice_id} started")
        return self._publish(practice)

    async def complete(
        self, practice_id: int
    ) -> tuple[PracticeResponse, list[HorseLogResponse]]:
        """in-progress -> completed, writing the workload batch.

        Args:
            practice_id: Practice to complete

        Returns:
            Completed practice and the workload entries written

        Raises:
            InvalidTransitionError: Practice is not in progress
            CompletionError: Batch failed; nothing was written
        """
        practice = await self._get_practice(practice_id)
        if practice.status != PracticeStatus.IN_PROGRESS.value:
            raise InvalidTransitionError(practice.status, PracticeStatus.COMPLETED.value)

        chukkers = [Chukker.model_validate(c) for c in practice.chukkers or []]
        usage = horse_usage(chukkers)
        horse_ids = sorted(usage)
        batch_id = completion_batch_id(practice_id)
        log_date = practice.date
        note = completion_note(practice)

        try:
            async with self.session.begin_nested():
                known = {h.id for h in await self.horse_repo.get_many(horse_ids)}
                missing = [horse_id for horse_id in horse_ids if horse_id not in known]
                if missing:
                    raise CompletionError(practice_id, missing, f"unknown horses {missing}")

                stale = await self.log_repo.delete_by_batch(batch_id, practice_id)
                if stale:
                    logger.warning(
                        f"Practice {practice_id}: replacing {stale} entries from an earlier attempt"
                    )

                logs = await self.log_repo.add_all(
                    [
                        HorseLog(
                            horse_id=horse_id,
                            date=log_date,
                            type=LogType.WORKLOAD.value,
                            chukkers_delta=usage[horse_id],
                            note=note,
                            practice_id=practice_id,
                            batch_id=batch_id,
                        )
                        for horse_id in horse_ids
                    ]
                )

                practice.status = PracticeStatus.COMPLETED.value
                practice.completed_at = datetime.now(timezone.utc)
                practice.completion_batch_id = batch_id
                await self.practice_repo.flush()
        except CompletionError as e:
            logger.error(e.message)
            raise
        except WriteFailureError as e:
            logger.error(f"Practice {practice_id} completion rolled back: {e.message}")
            raise CompletionError(practice_id, horse_ids, e.message) from e

        await self.session.refresh(practice)
        logger.info(
            f"Practice {practice_id} completed: {len(logs)} workload entries, "
            f"{sum(usage.values())} chukkers"
        )

        log_responses = [HorseLogResponse.model_validate(log) for log in logs]
        for log in log_responses:
            self.feed.stage(
                self.session,
                f"horses/{log.horse_id}/logs/{log.id}",
                log.model_dump(mode="json"),
            )
        return self._publish(practice), log_responses

    def _publish(self, practice: Practice) -> PracticeResponse:
        response = PracticeResponse.model_validate(practice)
        self.feed.stage(self.session, f"practices/{practice.id}", response.model_dump(mode="json"))
        return response
