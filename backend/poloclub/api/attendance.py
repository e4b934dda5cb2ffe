"""Attendance API routes, open to every signed-in user."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.auth import CurrentUser, get_current_user
from poloclub.database import get_db
from poloclub.schemas import AttendanceRequest, AttendanceResponse, PracticeResponse
from poloclub.services import PracticeService

router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.get("/upcoming", response_model=list[PracticeResponse])
async def get_upcoming_practices(
    today: date | None = None,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get practices that are still open for RSVP."""
    service = PracticeService(db)
    return await service.get_upcoming(today)


@router.post("/{practice_id}", response_model=AttendanceResponse)
async def toggle_attendance(
    practice_id: int,
    data: AttendanceRequest,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Confirm or withdraw a player's attendance."""
    if not user.is_admin and user.player_id != data.player_id:
        raise HTTPException(status_code=403, detail="You can only RSVP for yourself")

    service = PracticeService(db)
    return await service.toggle_attendance(practice_id, data.player_id)


@router.get("/{practice_id}/summary", response_class=PlainTextResponse)
async def get_practice_summary(
    practice_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the read-only text summary."""
    service = PracticeService(db)
    return await service.render_summary(practice_id)
