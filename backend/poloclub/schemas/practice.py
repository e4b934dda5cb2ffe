"""Practice schemas.

Teams, chukkers and assignments are documents owned by a practice. The
engine works on these models and returns new instances; the stored JSON is
their ``model_dump()``.
"""

import datetime
import enum

from pydantic import Field

from poloclub.config import get_settings
from poloclub.models import PracticeStatus
from poloclub.schemas.common import BaseSchema, TimestampSchema


class TeamSide(str, enum.Enum):
    """Team side. A plays in blue, B in red."""

    A = "A"
    B = "B"


class Assignment(BaseSchema):
    """One player riding one horse in a chukker."""

    player_id: int
    horse_id: int


class Chukker(BaseSchema):
    """Chukker document."""

    number: int = Field(..., ge=1)
    assignments: list[Assignment] = Field(default_factory=list)
    score_a: int = Field(0, ge=0)
    score_b: int = Field(0, ge=0)

    def horse_for(self, player_id: int) -> int | None:
        for assignment in self.assignments:
            if assignment.player_id == player_id:
                return assignment.horse_id
        return None


class Teams(BaseSchema):
    """Two disjoint player id lists."""

    A: list[int] = Field(default_factory=list)
    B: list[int] = Field(default_factory=list)

    def members(self, side: TeamSide | str) -> list[int]:
        return self.A if TeamSide(side) == TeamSide.A else self.B

    def side_of(self, player_id: int) -> TeamSide | None:
        if player_id in self.A:
            return TeamSide.A
        if player_id in self.B:
            return TeamSide.B
        return None

    @property
    def all_players(self) -> list[int]:
        return [*self.A, *self.B]


def _default_chukker_count() -> int:
    return get_settings().default_chukker_count


class PracticeCreate(BaseSchema):
    """Schema for creating a practice."""

    name: str = Field(..., min_length=1, max_length=100, description="Practice name")
    date: datetime.date = Field(..., description="Practice day")
    chukker_count: int = Field(default_factory=_default_chukker_count, ge=1)
    notes: str | None = None


class PracticeUpdate(BaseSchema):
    """Schema for updating practice details.

    ``status`` is an escape hatch; the start/complete endpoints are the
    guarded path.
    """

    name: str | None = Field(None, min_length=1, max_length=100)
    date: datetime.date | None = None
    notes: str | None = None
    status: PracticeStatus | None = None


class PracticeResponse(TimestampSchema):
    """Practice response schema."""

    id: int
    name: str
    date: datetime.date
    status: PracticeStatus
    notes: str | None = None
    teams: Teams
    chukkers: list[Chukker]
    confirmed_players: list[int]
    completed_at: datetime.datetime | None = None
    completion_batch_id: str | None = None


class PracticeListResponse(BaseSchema):
    """Practice list response schema."""

    items: list[PracticeResponse]
    total: int


class TeamAssignmentRequest(BaseSchema):
    """Put a player on a side, or take them off both sides with ``team=None``."""

    player_id: int
    team: TeamSide | None = None


class MovePlayerRequest(BaseSchema):
    """Move a player to the other side, keeping their horses."""

    player_id: int
    to_team: TeamSide


class HorseAssignmentRequest(BaseSchema):
    """Pair a player with a horse in a chukker. ``horse_id=None`` clears it."""

    player_id: int
    horse_id: int | None = None


class ScoreUpdate(BaseSchema):
    """Goals for one side in one chukker."""

    team: TeamSide
    score: int = Field(..., ge=0)


class AttendanceRequest(BaseSchema):
    """RSVP toggle."""

    player_id: int


class AssignmentResult(BaseSchema):
    """Practice after an assignment write, with advisory warnings."""

    practice: PracticeResponse
    warnings: list[str] = Field(default_factory=list)


class TeamBalanceResponse(BaseSchema):
    """Handicap balance between the two sides."""

    handicap_a: float
    handicap_b: float
    delta: float
    threshold: float
    unbalanced: bool


class HorseUsageItem(BaseSchema):
    """How many chukkers a horse is down for in a practice."""

    horse_id: int
    name: str | None = None
    usage: int
    max_chukkers_per_day: int | None = None
    over_limit: bool = False


class HorseOption(BaseSchema):
    """Entry in the horse picker for one (chukker, player) slot."""

    horse_id: int
    name: str
    usage: int
    max_chukkers_per_day: int
    at_limit: bool
    selected: bool


class ScoreResponse(BaseSchema):
    """Running or final score."""

    total_a: int
    total_b: int
    winner: str | None = None


class AttendanceResponse(BaseSchema):
    """Attendance state after a toggle."""

    practice_id: int
    player_id: int
    confirmed: bool
    confirmed_players: list[int]
