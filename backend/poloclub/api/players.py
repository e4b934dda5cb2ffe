"""Player API routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.auth import require_admin
from poloclub.database import get_db
from poloclub.repositories import PlayerRepository
from poloclub.schemas import PlayerCreate, PlayerListResponse, PlayerResponse, PlayerUpdate
from poloclub.services import PlayerService

router = APIRouter(prefix="/players", tags=["players"], dependencies=[Depends(require_admin)])


@router.get("", response_model=PlayerListResponse)
async def get_players(db: AsyncSession = Depends(get_db)):
    """Get active players by name."""
    service = PlayerService(db)
    players, total = await service.list_players()
    return PlayerListResponse(items=players, total=total)


@router.get("/search", response_model=list[PlayerResponse])
async def search_players(
    name: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    """Search players by name."""
    repo = PlayerRepository(db)
    players = await repo.search_by_name(name, limit)
    return [PlayerResponse.model_validate(p) for p in players]


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(
    player_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a player by ID."""
    service = PlayerService(db)
    return PlayerResponse.model_validate(await service.get_player(player_id))


@router.post("", response_model=PlayerResponse, status_code=201)
async def create_player(
    data: PlayerCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new player."""
    service = PlayerService(db)
    return await service.create_player(data)


@router.put("/{player_id}", response_model=PlayerResponse)
async def update_player(
    player_id: int,
    data: PlayerUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a player."""
    service = PlayerService(db)
    return await service.update_player(player_id, data)


@router.delete("/{player_id}", response_model=PlayerResponse)
async def retire_player(
    player_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Retire a player."""
    service = PlayerService(db)
    return await service.retire_player(player_id)
