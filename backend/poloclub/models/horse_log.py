"""Horse activity log model."""

import datetime
import enum

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from poloclub.database import Base
from poloclub.models.base import TimestampMixin


class LogType(str, enum.Enum):
    """Log entry type. Only WORKLOAD entries count towards workload."""

    WORKLOAD = "workload"
    NOTE = "note"
    HEALTH = "health"


class HorseLog(Base, TimestampMixin):
    """Append-only horse log entry."""

    __tablename__ = "horse_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    horse_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("horses.id"), nullable=False, index=True
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    chukkers_delta: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Set when written by practice completion
    practice_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("practices.id", ondelete="SET NULL"), nullable=True
    )
    batch_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)

    def __repr__(self) -> str:
        return (
            f"<HorseLog(id={self.id}, horse_id={self.horse_id}, date={self.date}, "
            f"type='{self.type}', delta={self.chukkers_delta})>"
        )
