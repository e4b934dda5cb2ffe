"""Shared model mixins."""

import enum
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column


class Lifecycle(str, enum.Enum):
    """Roster entity lifecycle. Retired rows stay in place for log history."""

    ACTIVE = "active"
    RETIRED = "retired"


class TimestampMixin:
    """Server-assigned created/updated timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class LifecycleMixin:
    """Single lifecycle state checked by every roster query path."""

    lifecycle: Mapped[str] = mapped_column(
        String(10), nullable=False, default=Lifecycle.ACTIVE.value, index=True
    )

    @property
    def is_active(self) -> bool:
        return self.lifecycle == Lifecycle.ACTIVE.value
