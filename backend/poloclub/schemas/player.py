"""Player schemas."""

from typing import Annotated

from pydantic import AfterValidator, Field

from poloclub.models import Lifecycle
from poloclub.schemas.common import BaseSchema, TimestampSchema


def _check_half_step(value: float) -> float:
    if (value * 2) != int(value * 2):
        raise ValueError("Handicap must be a multiple of 0.5")
    return value


Handicap = Annotated[float, Field(ge=-2, le=10), AfterValidator(_check_half_step)]


class PlayerBase(BaseSchema):
    """Base player schema."""

    name: str = Field(..., min_length=1, max_length=50, description="Player name")
    level: Handicap = Field(0.0, description="Handicap")
    notes: str | None = None


class PlayerCreate(PlayerBase):
    """Schema for creating a player."""

    pass


class PlayerUpdate(BaseSchema):
    """Schema for updating a player."""

    name: str | None = Field(None, min_length=1, max_length=50)
    level: Handicap | None = None
    notes: str | None = None


class PlayerResponse(PlayerBase, TimestampSchema):
    """Player response schema."""

    id: int
    lifecycle: Lifecycle


class PlayerListResponse(BaseSchema):
    """Player list response schema."""

    items: list[PlayerResponse]
    total: int
