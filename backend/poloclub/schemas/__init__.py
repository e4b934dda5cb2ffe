"""Pydantic schemas."""

from poloclub.schemas.auth import (
    SignInRequest,
    SignUpRequest,
    TokenResponse,
    UserResponse,
)
from poloclub.schemas.common import BaseSchema, TimestampSchema
from poloclub.schemas.horse import (
    HorseCreate,
    HorseListResponse,
    HorseResponse,
    HorseUpdate,
    WorkloadResponse,
)
from poloclub.schemas.horse_log import (
    HorseLogCreate,
    HorseLogListResponse,
    HorseLogResponse,
    QuickWorkloadCreate,
)
from poloclub.schemas.player import (
    PlayerCreate,
    PlayerListResponse,
    PlayerResponse,
    PlayerUpdate,
)
from poloclub.schemas.practice import (
    Assignment,
    AssignmentResult,
    AttendanceRequest,
    AttendanceResponse,
    Chukker,
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
    Teams,
    TeamSide,
)

__all__ = [
    # Common
    "BaseSchema",
    "TimestampSchema",
    # Auth
    "SignUpRequest",
    "SignInRequest",
    "TokenResponse",
    "UserResponse",
    # Horse
    "HorseCreate",
    "HorseUpdate",
    "HorseResponse",
    "HorseListResponse",
    "WorkloadResponse",
    # Horse log
    "HorseLogCreate",
    "HorseLogResponse",
    "HorseLogListResponse",
    "QuickWorkloadCreate",
    # Player
    "PlayerCreate",
    "PlayerUpdate",
    "PlayerResponse",
    "PlayerListResponse",
    # Practice
    "TeamSide",
    "Teams",
    "Assignment",
    "Chukker",
    "PracticeCreate",
    "PracticeUpdate",
    "PracticeResponse",
    "PracticeListResponse",
    "TeamAssignmentRequest",
    "MovePlayerRequest",
    "HorseAssignmentRequest",
    "ScoreUpdate",
    "AttendanceRequest",
    "AssignmentResult",
    "TeamBalanceResponse",
    "HorseUsageItem",
    "HorseOption",
    "ScoreResponse",
    "AttendanceResponse",
]
