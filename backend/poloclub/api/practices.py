"""Practice API routes: planning, allocation, scoring and completion."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.auth import require_admin
from poloclub.database import get_db
from poloclub.models import PracticeStatus
from poloclub.schemas import (
    AssignmentResult,
    HorseAssignmentRequest,
    HorseOption,
    HorseUsageItem,
    MovePlayerRequest,
    PracticeCreate,
    PracticeListResponse,
    PracticeResponse,
    PracticeUpdate,
    ScoreResponse,
    ScoreUpdate,
    TeamAssignmentRequest,
    TeamBalanceResponse,
)
from poloclub.services import CompletionService, PracticeService

router = APIRouter(prefix="/practices", tags=["practices"], dependencies=[Depends(require_admin)])


@router.get("", response_model=PracticeListResponse)
async def get_practices(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    status: PracticeStatus | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Get practices, most recent first."""
    service = PracticeService(db)
    practices, total = await service.list_practices(
        skip=skip, limit=limit, status=status.value if status else None
    )
    return PracticeListResponse(items=practices, total=total)


@router.get("/{practice_id}", response_model=PracticeResponse)
async def get_practice(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a practice by ID."""
    service = PracticeService(db)
    return await service.get_response(practice_id)


@router.post("", response_model=PracticeResponse, status_code=201)
async def create_practice(
    data: PracticeCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a planned practice with empty chukkers."""
    service = PracticeService(db)
    return await service.create_practice(data)


@router.put("/{practice_id}", response_model=PracticeResponse)
async def update_practice(
    practice_id: int,
    data: PracticeUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update practice details."""
    service = PracticeService(db)
    return await service.update_practice(practice_id, data)


@router.delete("/{practice_id}", status_code=204)
async def delete_practice(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a practice. Workload already written stays on the horses."""
    service = PracticeService(db)
    await service.delete_practice(practice_id)


# Teams


@router.put("/{practice_id}/teams", response_model=PracticeResponse)
async def assign_team(
    practice_id: int,
    data: TeamAssignmentRequest,
    db: AsyncSession = Depends(get_db),
):
    """Put a player on a side, or take them off the teams."""
    service = PracticeService(db)
    return await service.assign_team(practice_id, data.player_id, data.team)


@router.post("/{practice_id}/teams/move", response_model=PracticeResponse)
async def move_player(
    practice_id: int,
    data: MovePlayerRequest,
    db: AsyncSession = Depends(get_db),
):
    """Move a player to another side."""
    service = PracticeService(db)
    return await service.move_player(practice_id, data.player_id, data.to_team)


@router.get("/{practice_id}/balance", response_model=TeamBalanceResponse)
async def get_team_balance(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get handicap totals per side."""
    service = PracticeService(db)
    return await service.get_balance(practice_id)


# Chukkers


@router.post("/{practice_id}/chukkers", response_model=PracticeResponse, status_code=201)
async def add_chukker(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Append an empty chukker."""
    service = PracticeService(db)
    return await service.add_chukker(practice_id)


@router.delete("/{practice_id}/chukkers/{number}", response_model=PracticeResponse)
async def remove_chukker(
    practice_id: int,
    number: int,
    db: AsyncSession = Depends(get_db),
):
    """Remove a chukker and renumber the rest."""
    service = PracticeService(db)
    return await service.remove_chukker(practice_id, number)


@router.put("/{practice_id}/chukkers/{number}/assignments", response_model=AssignmentResult)
async def assign_horse(
    practice_id: int,
    number: int,
    data: HorseAssignmentRequest,
    db: AsyncSession = Depends(get_db),
):
    """Set or clear the horse a player rides in a chukker."""
    service = PracticeService(db)
    return await service.assign_horse(practice_id, number, data.player_id, data.horse_id)


@router.get("/{practice_id}/chukkers/{number}/options", response_model=list[HorseOption])
async def get_horse_options(
    practice_id: int,
    number: int,
    player_id: int = Query(...),
    db: AsyncSession = Depends(get_db),
):
    """Get the horses that can be picked for a player in a chukker."""
    service = PracticeService(db)
    return await service.get_horse_options(practice_id, number, player_id)


@router.put("/{practice_id}/chukkers/{number}/score", response_model=PracticeResponse)
async def set_chukker_score(
    practice_id: int,
    number: int,
    data: ScoreUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Set one side's goals in a chukker."""
    service = PracticeService(db)
    return await service.set_score(practice_id, number, data.team, data.score)


@router.get("/{practice_id}/usage", response_model=list[HorseUsageItem])
async def get_horse_usage(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get chukkers per horse against each horse's daily cap."""
    service = PracticeService(db)
    return await service.get_horse_usage(practice_id)


@router.get("/{practice_id}/score", response_model=ScoreResponse)
async def get_score(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get total goals per side and the winner."""
    service = PracticeService(db)
    return await service.get_score(practice_id)


# Lifecycle


@router.post("/{practice_id}/start", response_model=PracticeResponse)
async def start_practice(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Move a planned practice to in progress."""
    service = CompletionService(db)
    return await service.start(practice_id)


@router.post("/{practice_id}/complete", response_model=PracticeResponse)
async def complete_practice(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Complete the practice and write each horse's workload."""
    service = CompletionService(db)
    practice, _ = await service.complete(practice_id)
    return practice


@router.get("/{practice_id}/summary", response_class=PlainTextResponse)
async def get_practice_summary(
    practice_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get the shareable text summary."""
    service = PracticeService(db)
    return await service.render_summary(practice_id)
