"""Horse API routes: roster, activity log and workload."""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.auth import require_admin
from poloclub.config import get_settings
from poloclub.database import get_db
from poloclub.models import HorseStatus
from poloclub.repositories import HorseRepository
from poloclub.schemas import (
    HorseCreate,
    HorseListResponse,
    HorseLogCreate,
    HorseLogListResponse,
    HorseLogResponse,
    HorseResponse,
    HorseUpdate,
    QuickWorkloadCreate,
    WorkloadResponse,
)
from poloclub.services import HorseService

router = APIRouter(prefix="/horses", tags=["horses"], dependencies=[Depends(require_admin)])


@router.get("", response_model=HorseListResponse)
async def get_horses(
    status: HorseStatus | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Get active horses, optionally filtered by status."""
    service = HorseService(db)
    horses, total, counts = await service.list_horses(status.value if status else None)
    return HorseListResponse(items=horses, total=total, status_counts=counts)


@router.get("/search", response_model=list[HorseResponse])
async def search_horses(
    name: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    """Search horses by name."""
    repo = HorseRepository(db)
    horses = await repo.search_by_name(name, limit)
    return [HorseResponse.model_validate(h) for h in horses]


@router.get("/{horse_id}", response_model=HorseResponse)
async def get_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a horse by ID, retired or not."""
    service = HorseService(db)
    return HorseResponse.model_validate(await service.get_horse(horse_id))


@router.post("", response_model=HorseResponse, status_code=201)
async def create_horse(
    data: HorseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new horse."""
    service = HorseService(db)
    return await service.create_horse(data)


@router.put("/{horse_id}", response_model=HorseResponse)
async def update_horse(
    horse_id: int,
    data: HorseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a horse."""
    service = HorseService(db)
    return await service.update_horse(horse_id, data)


@router.delete("/{horse_id}", response_model=HorseResponse)
async def retire_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Retire a horse. Its history is kept."""
    service = HorseService(db)
    return await service.retire_horse(horse_id)


@router.get("/{horse_id}/logs", response_model=HorseLogListResponse)
async def get_horse_logs(
    horse_id: int,
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
):
    """Get a horse's log entries, newest first."""
    service = HorseService(db)
    logs, total = await service.get_logs(
        horse_id, skip=skip, limit=limit or get_settings().horse_log_page_size
    )
    return HorseLogListResponse(items=logs, total=total)


@router.post("/{horse_id}/logs", response_model=HorseLogResponse, status_code=201)
async def add_horse_log(
    horse_id: int,
    data: HorseLogCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add a workload, note or health entry."""
    service = HorseService(db)
    return await service.add_log(horse_id, data)


@router.post("/{horse_id}/workload", response_model=HorseLogResponse, status_code=201)
async def add_quick_workload(
    horse_id: int,
    data: QuickWorkloadCreate,
    db: AsyncSession = Depends(get_db),
):
    """Record +N chukkers for today."""
    service = HorseService(db)
    return await service.quick_workload(horse_id, data.chukkers)


@router.delete("/{horse_id}/logs/{log_id}", status_code=204)
async def delete_horse_log(
    horse_id: int,
    log_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a log entry."""
    service = HorseService(db)
    await service.delete_log(horse_id, log_id)


@router.get("/{horse_id}/workload", response_model=WorkloadResponse)
async def get_horse_workload(
    horse_id: int,
    on: date | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Get today's and the trailing week's workload."""
    service = HorseService(db)
    return await service.get_workload(horse_id, on)
