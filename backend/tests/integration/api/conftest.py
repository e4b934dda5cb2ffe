"""Shared fixtures for API integration tests."""

import sys
from datetime import date
from pathlib import Path
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from poloclub.auth import create_access_token, email_role_resolver, get_role_resolver
from poloclub.database import Base, configure_sqlite, get_db
from poloclub.main import app
from poloclub.models import Horse, Player, Practice

from tests.fixtures.factories import create_horse, create_player, create_practice, create_user

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture(scope="function")
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


@pytest.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session for tests."""
    session_factory = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="function")
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests."""
    # Create a dependency override that uses the test session
    async def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_role_resolver] = lambda: email_role_resolver([ADMIN_EMAIL])

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up overrides
    app.dependency_overrides.pop(get_db, None)
    app.dependency_overrides.pop(get_role_resolver, None)


async def auth_headers(db_session: AsyncSession, email: str, player_id: int | None = None) -> dict[str, str]:
    user = create_user(email=email, player_id=player_id)
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return {"Authorization": f"Bearer {create_access_token(user.id, user.email)}"}


@pytest.fixture
async def admin_headers(db_session: AsyncSession) -> dict[str, str]:
    """Bearer header for the club administrator."""
    return await auth_headers(db_session, ADMIN_EMAIL)


@pytest.fixture
async def player_headers(db_session: AsyncSession, test_player: Player) -> dict[str, str]:
    """Bearer header for a signed-in player linked to ``test_player``."""
    return await auth_headers(db_session, "juan@example.com", test_player.id)


@pytest.fixture
async def test_horse(db_session: AsyncSession) -> Horse:
    """Create a sample horse for testing."""
    horse = create_horse(name="Matera", max_chukkers_per_day=2)
    db_session.add(horse)
    await db_session.commit()
    await db_session.refresh(horse)
    return horse


@pytest.fixture
async def test_horses(db_session: AsyncSession) -> list[Horse]:
    """Create available horses for testing."""
    horses = []
    for name in ["Bonita", "Chispa", "Estrella"]:
        horse = create_horse(name=name)
        db_session.add(horse)
        horses.append(horse)
    await db_session.commit()
    for horse in horses:
        await db_session.refresh(horse)
    return horses


@pytest.fixture
async def test_player(db_session: AsyncSession) -> Player:
    """Create a sample player for testing."""
    player = create_player(name="Juan", level=2.0)
    db_session.add(player)
    await db_session.commit()
    await db_session.refresh(player)
    return player


@pytest.fixture
async def test_players(db_session: AsyncSession) -> list[Player]:
    """Create players with handicaps 2, 4 and 1."""
    players = []
    for name, level in [("Ana", 2.0), ("Bruno", 4.0), ("Carla", 1.0)]:
        player = create_player(name=name, level=level)
        db_session.add(player)
        players.append(player)
    await db_session.commit()
    for player in players:
        await db_session.refresh(player)
    return players


@pytest.fixture
async def test_practice(db_session: AsyncSession) -> Practice:
    """Create a planned practice with four empty chukkers."""
    practice = create_practice(name="Práctica sábado", practice_date=date(2024, 10, 12))
    db_session.add(practice)
    await db_session.commit()
    await db_session.refresh(practice)
    return practice
