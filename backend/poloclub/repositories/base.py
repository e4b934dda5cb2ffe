"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.database import Base
from poloclub.exceptions import WriteFailureError
from poloclub.models import Lifecycle

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository class with CRUD operations."""

    def __init__(self, model: type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def flush(self) -> None:
        """Flush pending writes, reporting driver errors as write failures."""
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Write to {self.model.__tablename__} failed: {e}")
            raise WriteFailureError(f"Could not save {self.model.__name__.lower()}") from e

    async def get(self, id: int) -> ModelType | None:
        """Get a record by ID."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_many(self, ids: list[int]) -> list[ModelType]:
        """Get records by ID; missing IDs are skipped."""
        if not ids:
            return []
        result = await self.session.execute(
            select(self.model).where(self.model.id.in_(set(ids)))
        )
        return list(result.scalars().all())

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        filters: dict[str, Any] | None = None,
    ) -> list[ModelType]:
        """Get all records with optional pagination and filters."""
        query = select(self.model)

        if filters:
            for key, value in filters.items():
                if hasattr(self.model, key) and value is not None:
                    query = query.where(getattr(self.model, key) == value)

        query = query.offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        """Count records with optional filters."""
        query = select(func.count()).select_from(self.model)

        if filters:
            for key, value in filters.items():
                if hasattr(self.model, key) and value is not None:
                    query = query.where(getattr(self.model, key) == value)

        result = await self.session.execute(query)
        return result.scalar_one()

    async def create(self, data: dict[str, Any]) -> ModelType:
        """Create a new record."""
        instance = self.model(**data)
        self.session.add(instance)
        await self.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, id: int, data: dict[str, Any]) -> ModelType | None:
        """Update a record by ID."""
        instance = await self.get(id)
        if instance is None:
            return None

        columns = self.model.__table__.columns
        for key, value in data.items():
            if not hasattr(instance, key):
                continue
            # None clears nullable columns and is skipped for required ones.
            if value is None and not (key in columns and columns[key].nullable):
                continue
            setattr(instance, key, value)

        await self.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: int) -> bool:
        """Delete a record by ID."""
        instance = await self.get(id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.flush()
        return True


class LifecycleRepository(BaseRepository[ModelType]):
    """Repository for roster models that are retired instead of deleted.

    Every listing goes through ``get_active`` so retired rows never show up
    in roster views, while ``get`` still resolves them for history.
    """

    async def get_active(
        self,
        skip: int = 0,
        limit: int = 500,
        filters: dict[str, Any] | None = None,
    ) -> list[ModelType]:
        """Active records ordered by name."""
        query = select(self.model).where(self.model.lifecycle == Lifecycle.ACTIVE.value)

        if filters:
            for key, value in filters.items():
                if hasattr(self.model, key) and value is not None:
                    query = query.where(getattr(self.model, key) == value)

        query = query.order_by(self.model.name).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_active(self, filters: dict[str, Any] | None = None) -> int:
        """Count active records."""
        return await self.count({**(filters or {}), "lifecycle": Lifecycle.ACTIVE.value})

    async def retire(self, id: int) -> ModelType | None:
        """Soft delete: mark the record retired and keep the row."""
        return await self.update(id, {"lifecycle": Lifecycle.RETIRED.value})
