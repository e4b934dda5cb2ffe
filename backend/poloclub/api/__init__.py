"""API routers."""

from poloclub.api.attendance import router as attendance_router
from poloclub.api.auth import router as auth_router
from poloclub.api.horses import router as horses_router
from poloclub.api.players import router as players_router
from poloclub.api.practices import router as practices_router

__all__ = [
    "auth_router",
    "horses_router",
    "players_router",
    "practices_router",
    "attendance_router",
]
