"""Horse log schemas."""

import datetime

from pydantic import Field, model_validator

from poloclub.models import LogType
from poloclub.schemas.common import BaseSchema, TimestampSchema


class HorseLogCreate(BaseSchema):
    """Schema for a manual log entry."""

    date: datetime.date = Field(default_factory=datetime.date.today, description="Calendar day of the activity")
    type: LogType = LogType.WORKLOAD
    chukkers_delta: int = Field(0, ge=-10, le=10)
    note: str | None = None

    @model_validator(mode="after")
    def only_workload_carries_delta(self) -> "HorseLogCreate":
        if self.type != LogType.WORKLOAD:
            self.chukkers_delta = 0
        return self


class QuickWorkloadCreate(BaseSchema):
    """Quick +1 or +2 chukkers for today."""

    chukkers: int = Field(1, ge=1, le=2)


class HorseLogResponse(TimestampSchema):
    """Horse log response schema."""

    id: int
    horse_id: int
    date: datetime.date
    type: LogType
    chukkers_delta: int
    note: str | None = None
    practice_id: int | None = None
    batch_id: str | None = None


class HorseLogListResponse(BaseSchema):
    """Horse log list response schema."""

    items: list[HorseLogResponse]
    total: int
