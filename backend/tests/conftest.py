"""Shared test fixtures."""

import sys
from datetime import date
from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from poloclub.database import Base, configure_sqlite
from poloclub.models import Horse, HorseStatus, Player, Practice
from poloclub.services.change_feed import ChangeFeed

from tests.fixtures.factories import create_horse, create_player, create_practice


@pytest.fixture
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
    )
    configure_sqlite(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def feed() -> ChangeFeed:
    """Isolated change feed."""
    return ChangeFeed()


@pytest.fixture
async def test_horse(db_session: AsyncSession) -> Horse:
    """Create a sample horse for testing."""
    horse = create_horse(name="Matera", max_chukkers_per_day=2)
    db_session.add(horse)
    await db_session.flush()
    await db_session.refresh(horse)
    return horse


@pytest.fixture
async def test_horses(db_session: AsyncSession) -> list[Horse]:
    """Create a small string of horses with mixed statuses."""
    horses = []
    horse_data = [
        ("Bonita", HorseStatus.AVAILABLE.value, 2),
        ("Chispa", HorseStatus.AVAILABLE.value, 3),
        ("Duquesa", HorseStatus.REST.value, 2),
        ("Estrella", HorseStatus.AVAILABLE.value, 1),
        ("Fortuna", HorseStatus.OBSERVE.value, 2),
    ]
    for name, status, cap in horse_data:
        horse = create_horse(name=name, status=status, max_chukkers_per_day=cap)
        db_session.add(horse)
        horses.append(horse)
    await db_session.flush()
    for horse in horses:
        await db_session.refresh(horse)
    return horses


@pytest.fixture
async def test_player(db_session: AsyncSession) -> Player:
    """Create a sample player for testing."""
    player = create_player(name="Juan", level=2.0)
    db_session.add(player)
    await db_session.flush()
    await db_session.refresh(player)
    return player


@pytest.fixture
async def test_players(db_session: AsyncSession) -> list[Player]:
    """Create four players with handicaps 2, 4, 1 and 0.5."""
    players = []
    for name, level in [("Ana", 2.0), ("Bruno", 4.0), ("Carla", 1.0), ("Diego", 0.5)]:
        player = create_player(name=name, level=level)
        db_session.add(player)
        players.append(player)
    await db_session.flush()
    for player in players:
        await db_session.refresh(player)
    return players


@pytest.fixture
async def test_practice(db_session: AsyncSession) -> Practice:
    """Create a planned practice with four empty chukkers."""
    practice = create_practice(name="Práctica sábado", practice_date=date(2024, 10, 12))
    db_session.add(practice)
    await db_session.flush()
    await db_session.refresh(practice)
    return practice
