"""Player model."""

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from poloclub.database import Base
from poloclub.models.base import LifecycleMixin, TimestampMixin


class Player(Base, TimestampMixin, LifecycleMixin):
    """Player table model."""

    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    level: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)  # handicap
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Player(id={self.id}, name='{self.name}', level={self.level})>"
