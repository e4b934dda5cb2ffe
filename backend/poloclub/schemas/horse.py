"""Horse schemas."""

import datetime

from pydantic import Field

from poloclub.config import get_settings
from poloclub.models import HorseStatus, Lifecycle, Suitability, Temperament
from poloclub.schemas.common import BaseSchema, TimestampSchema


def _default_max_chukkers() -> int:
    return get_settings().default_max_chukkers_per_day


class HorseBase(BaseSchema):
    """Base horse schema."""

    name: str = Field(..., min_length=1, max_length=50, description="Horse name")
    status: HorseStatus = Field(HorseStatus.AVAILABLE, description="Barn status")
    suitability: Suitability = Suitability.INTERMEDIATE
    temperament: Temperament = Temperament.MEDIUM
    max_chukkers_per_day: int = Field(
        default_factory=_default_max_chukkers, ge=1, le=10, description="Daily chukker cap"
    )
    notes: str | None = None


class HorseCreate(HorseBase):
    """Schema for creating a horse."""

    pass


class HorseUpdate(BaseSchema):
    """Schema for updating a horse."""

    name: str | None = Field(None, min_length=1, max_length=50)
    status: HorseStatus | None = None
    suitability: Suitability | None = None
    temperament: Temperament | None = None
    max_chukkers_per_day: int | None = Field(None, ge=1, le=10)
    notes: str | None = None


class HorseResponse(HorseBase, TimestampSchema):
    """Horse response schema."""

    id: int
    lifecycle: Lifecycle


class HorseListResponse(BaseSchema):
    """Horse list response schema."""

    items: list[HorseResponse]
    total: int
    status_counts: dict[str, int] = Field(default_factory=dict)


class WorkloadResponse(BaseSchema):
    """Derived workload figures for one horse."""

    horse_id: int
    date: datetime.date
    today: int
    week: int
    max_chukkers_per_day: int
    overworked: bool
