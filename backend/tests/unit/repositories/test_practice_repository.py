"""Tests for practice repository."""

from datetime import date

import pytest

from poloclub.models import PracticeStatus
from poloclub.repositories.practice_repository import PracticeRepository

from tests.fixtures.factories import create_practice


@pytest.fixture
async def practices(db_session):
    items = [
        create_practice(name="Pasada", practice_date=date(2024, 10, 5), status=PracticeStatus.COMPLETED.value),
        create_practice(name="Hoy", practice_date=date(2024, 10, 12), status=PracticeStatus.IN_PROGRESS.value),
        create_practice(name="Próxima", practice_date=date(2024, 10, 19)),
        create_practice(name="Después", practice_date=date(2024, 10, 26)),
    ]
    db_session.add_all(items)
    await db_session.flush()
    return items


class TestPracticeRepository:
    """Tests for PracticeRepository queries."""

    @pytest.mark.asyncio
    async def test_get_latest_orders_by_date_desc(self, db_session, practices):
        repo = PracticeRepository(db_session)

        result = await repo.get_latest()

        assert [p.name for p in result] == ["Después", "Próxima", "Hoy", "Pasada"]

    @pytest.mark.asyncio
    async def test_get_latest_by_status(self, db_session, practices):
        repo = PracticeRepository(db_session)

        result = await repo.get_latest(status=PracticeStatus.PLANNED.value)

        assert [p.name for p in result] == ["Después", "Próxima"]

    @pytest.mark.asyncio
    async def test_get_upcoming(self, db_session, practices):
        """Open practices from today on, soonest first."""
        repo = PracticeRepository(db_session)

        result = await repo.get_upcoming(date(2024, 10, 12))

        assert [p.name for p in result] == ["Hoy", "Próxima", "Después"]

    @pytest.mark.asyncio
    async def test_documents_round_trip(self, db_session, test_practice):
        """JSON fields come back as plain lists and dicts."""
        repo = PracticeRepository(db_session)

        practice = await repo.update(test_practice.id, {"teams": {"A": [1], "B": [2]}, "confirmed_players": [1]})

        assert practice.teams == {"A": [1], "B": [2]}
        assert practice.confirmed_players == [1]
        assert [c["number"] for c in practice.chukkers] == [1, 2, 3, 4]
