"""Horse model."""

import enum

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from poloclub.database import Base
from poloclub.models.base import LifecycleMixin, TimestampMixin


class HorseStatus(str, enum.Enum):
    """Barn status. Only AVAILABLE horses are offered for work."""

    AVAILABLE = "available"
    REST = "rest"
    OBSERVE = "observe"
    OUT = "out"


class Suitability(str, enum.Enum):
    """Rider level the horse suits."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Temperament(str, enum.Enum):
    """Temperament enum."""

    CALM = "calm"
    MEDIUM = "medium"
    HOT = "hot"


class Horse(Base, TimestampMixin, LifecycleMixin):
    """Horse table model."""

    __tablename__ = "horses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(10), nullable=False, default=HorseStatus.AVAILABLE.value
    )
    suitability: Mapped[str] = mapped_column(
        String(15), nullable=False, default=Suitability.INTERMEDIATE.value
    )
    temperament: Mapped[str] = mapped_column(
        String(10), nullable=False, default=Temperament.MEDIUM.value
    )
    max_chukkers_per_day: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Horse(id={self.id}, name='{self.name}', status='{self.status}')>"
