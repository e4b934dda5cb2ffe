"""Tests for the practice completion workflow."""

from datetime import date

import pytest

from poloclub.exceptions import CompletionError, InvalidTransitionError, WriteFailureError
from poloclub.models import LogType, PracticeStatus
from poloclub.repositories import HorseLogRepository, PracticeRepository
from poloclub.services import CompletionService, HorseService, PracticeService, completion_batch_id

from tests.fixtures.factories import create_chukkers, create_log, create_practice


async def add_practice(db_session, **kwargs):
    practice = create_practice(**kwargs)
    db_session.add(practice)
    await db_session.flush()
    await db_session.refresh(practice)
    return practice


class TestStart:
    """Tests for planned -> in-progress."""

    @pytest.mark.asyncio
    async def test_start_planned_practice(self, db_session, test_practice, feed):
        service = CompletionService(db_session, feed)

        practice = await service.start(test_practice.id)

        assert practice.status == PracticeStatus.IN_PROGRESS.value

    @pytest.mark.asyncio
    async def test_cannot_start_twice(self, db_session, test_practice, feed):
        service = CompletionService(db_session, feed)
        await service.start(test_practice.id)

        with pytest.raises(InvalidTransitionError):
            await service.start(test_practice.id)


class TestComplete:
    """Tests for in-progress -> completed."""

    @pytest.mark.asyncio
    async def test_one_entry_per_horse_with_usage(self, db_session, test_horse, feed):
        """Two players on the same horse give one entry of 2 chukkers."""
        practice = await add_practice(
            db_session,
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(1, {1: [(1, test_horse.id), (2, test_horse.id)]}),
        )
        service = CompletionService(db_session, feed)

        completed, logs = await service.complete(practice.id)

        assert completed.status == PracticeStatus.COMPLETED.value
        assert completed.completed_at is not None
        assert completed.completion_batch_id == completion_batch_id(practice.id)
        assert len(logs) == 1
        assert logs[0].horse_id == test_horse.id
        assert logs[0].chukkers_delta == 2
        assert logs[0].type == LogType.WORKLOAD.value
        assert logs[0].date == practice.date
        assert logs[0].practice_id == practice.id
        assert logs[0].note == "Practice: Práctica sábado"

    @pytest.mark.asyncio
    async def test_usage_summed_across_chukkers(self, db_session, test_horses, feed):
        bonita, chispa = test_horses[0], test_horses[1]
        practice = await add_practice(
            db_session,
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(
                3,
                {1: [(1, bonita.id), (2, chispa.id)], 2: [(1, chispa.id)], 3: [(1, bonita.id), (2, chispa.id)]},
            ),
        )
        service = CompletionService(db_session, feed)

        _, logs = await service.complete(practice.id)

        assert {log.horse_id: log.chukkers_delta for log in logs} == {bonita.id: 2, chispa.id: 3}

    @pytest.mark.asyncio
    async def test_workload_reflects_completion(self, db_session, test_horse, feed):
        practice = await add_practice(
            db_session,
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(2, {1: [(1, test_horse.id)], 2: [(1, test_horse.id)]}),
        )
        await CompletionService(db_session, feed).complete(practice.id)

        workload = await HorseService(db_session, feed).get_workload(test_horse.id, practice.date)

        assert workload.today == 2
        assert workload.overworked is True

    @pytest.mark.asyncio
    async def test_no_assignments_completes_without_entries(self, db_session, feed):
        practice = await add_practice(db_session, status=PracticeStatus.IN_PROGRESS.value)

        completed, logs = await CompletionService(db_session, feed).complete(practice.id)

        assert completed.status == PracticeStatus.COMPLETED.value
        assert logs == []

    @pytest.mark.asyncio
    async def test_planned_practice_cannot_complete(self, db_session, test_practice, feed):
        with pytest.raises(InvalidTransitionError):
            await CompletionService(db_session, feed).complete(test_practice.id)

    @pytest.mark.asyncio
    async def test_completed_practice_cannot_complete_again(self, db_session, test_horse, feed):
        practice = await add_practice(
            db_session,
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(1, {1: [(1, test_horse.id)]}),
        )
        service = CompletionService(db_session, feed)
        await service.complete(practice.id)

        with pytest.raises(InvalidTransitionError):
            await service.complete(practice.id)

        assert len(await HorseLogRepository(db_session).get_by_horse(test_horse.id)) == 1


class TestCompletionFailure:
    """Tests for all-or-nothing completion."""

    @pytest.mark.asyncio
    async def test_unknown_horse_fails_whole_batch(self, db_session, test_horse, feed):
        """A missing horse id writes nothing and keeps the practice in progress."""
        practice = await add_practice(
            db_session,
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(1, {1: [(1, test_horse.id), (2, 99999)]}),
        )
        service = CompletionService(db_session, feed)

        with pytest.raises(CompletionError) as exc_info:
            await service.complete(practice.id)

        assert exc_info.value.horse_ids == [99999]
        assert await HorseLogRepository(db_session).get_by_batch(completion_batch_id(practice.id)) == []
        stored = await PracticeRepository(db_session).get(practice.id)
        assert stored.status == PracticeStatus.IN_PROGRESS.value

    @pytest.mark.asyncio
    async def test_write_failure_rolls_back_and_retry_succeeds(
        self, db_session, test_horses, feed, monkeypatch
    ):
        bonita, chispa = test_horses[0], test_horses[1]
        practice = await add_practice(
            db_session,
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(2, {1: [(1, bonita.id)], 2: [(1, chispa.id)]}),
        )

        async def failing_add_all(self, logs):
            self.session.add_all(logs)
            await self.session.flush()
            raise WriteFailureError("disk full")

        monkeypatch.setattr(HorseLogRepository, "add_all", failing_add_all)
        service = CompletionService(db_session, feed)

        with pytest.raises(CompletionError):
            await service.complete(practice.id)

        log_repo = HorseLogRepository(db_session)
        assert await log_repo.get_by_batch(completion_batch_id(practice.id)) == []
        stored = await PracticeRepository(db_session).get(practice.id)
        assert stored.status == PracticeStatus.IN_PROGRESS.value

        monkeypatch.undo()
        completed, logs = await service.complete(practice.id)

        assert completed.status == PracticeStatus.COMPLETED.value
        assert len(logs) == 2

    @pytest.mark.asyncio
    async def test_retry_replaces_entries_from_earlier_attempt(self, db_session, test_horse, feed):
        """Entries already carrying the batch id are not counted twice."""
        practice = await add_practice(
            db_session,
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(2, {1: [(1, test_horse.id)], 2: [(2, test_horse.id)]}),
        )
        log_repo = HorseLogRepository(db_session)
        await log_repo.add_all(
            [
                create_log(
                    test_horse.id,
                    practice.date,
                    2,
                    practice_id=practice.id,
                    batch_id=completion_batch_id(practice.id),
                )
            ]
        )

        await CompletionService(db_session, feed).complete(practice.id)

        logs = await log_repo.get_by_batch(completion_batch_id(practice.id))
        assert len(logs) == 1
        assert logs[0].chukkers_delta == 2
        workload = await HorseService(db_session, feed).get_workload(test_horse.id, practice.date)
        assert workload.today == 2

    @pytest.mark.asyncio
    async def test_deleted_practice_keeps_its_workload(self, db_session, test_horse, feed):
        """Completing a later practice never removes a deleted practice's entries."""
        old = await add_practice(
            db_session,
            name="Old",
            practice_date=date(2024, 10, 12),
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(1, {1: [(1, test_horse.id)]}),
        )
        service = CompletionService(db_session, feed)
        await service.complete(old.id)
        await PracticeService(db_session, feed).delete_practice(old.id)

        new = await add_practice(
            db_session,
            name="New",
            practice_date=date(2024, 10, 19),
            status=PracticeStatus.IN_PROGRESS.value,
            chukkers=create_chukkers(1, {1: [(1, test_horse.id)]}),
        )
        await service.complete(new.id)

        assert new.id != old.id
        horse_service = HorseService(db_session, feed)
        assert (await horse_service.get_workload(test_horse.id, date(2024, 10, 12))).today == 1
        assert (await horse_service.get_workload(test_horse.id, date(2024, 10, 19))).today == 1
