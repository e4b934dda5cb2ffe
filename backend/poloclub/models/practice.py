"""Practice session model."""

import datetime
import enum

from sqlalchemy import JSON, Date, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from poloclub.database import Base
from poloclub.models.base import TimestampMixin


class PracticeStatus(str, enum.Enum):
    """Practice state machine: planned -> in-progress -> completed."""

    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def empty_teams() -> dict[str, list[int]]:
    return {"A": [], "B": []}


class Practice(Base, TimestampMixin):
    """Practice table model.

    Teams, chukkers and confirmed players are owned by the practice and
    stored as JSON documents; every edit replaces the whole field.
    """

    __tablename__ = "practices"
    # Ids are never reused; completion batch ids are derived from them.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PracticeStatus.PLANNED.value, index=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # {"A": [player_id, ...], "B": [...]}
    teams: Mapped[dict] = mapped_column(JSON, nullable=False, default=empty_teams)
    # [{"number": 1, "assignments": [{"player_id": 1, "horse_id": 2}], "score_a": 0, "score_b": 0}]
    chukkers: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    confirmed_players: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    completed_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completion_batch_id: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<Practice(id={self.id}, name='{self.name}', date={self.date}, status='{self.status}')>"
