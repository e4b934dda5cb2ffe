"""User account model."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from poloclub.database import Base
from poloclub.models.base import TimestampMixin


class User(Base, TimestampMixin):
    """Signed-up identity. E-mail is stored lower-case."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    player_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("players.id"), nullable=True, unique=True
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
