"""Base repository: generic CRUD returning typed save results.

Writes run inside a SAVEPOINT so a unique-constraint violation rolls back
only the failed statement and the session stays usable. The violation is
reported as a UniqueViolation value; any other integrity error propagates.

With commit=True (the default used by the API) each successful write is
committed before returning, so the service reconciles the cache only after
the change is visible to other sessions.
"""

from typing import Any

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from registry.application.dtos.results import Saved, SaveResult, UniqueViolation
from registry.core.constants import UNIQUE_VIOLATION_SQLSTATE
from registry.infrastructure.persistence.database import Base


def _unique_violation_from(exc: IntegrityError) -> UniqueViolation | None:
    """Return UniqueViolation if exc is a unique-constraint failure, else None.

    asyncpg exposes SQLSTATE (and the constraint name) on the driver exception
    chained behind SQLAlchemy's adapted error; SQLite only has the message.
    """
    orig = exc.orig
    driver_exc = getattr(orig, "__cause__", None) or orig
    code = getattr(orig, "pgcode", None) or getattr(driver_exc, "sqlstate", None)
    if code is not None:
        if code != UNIQUE_VIOLATION_SQLSTATE:
            return None
        return UniqueViolation(getattr(driver_exc, "constraint_name", None))
    if "unique" in str(orig).lower():
        return UniqueViolation()
    return None


class BaseRepository[ModelType: Base]:
    """Base repository with exists, get_by_id, get_all, create, update, delete_by_id."""

    def __init__(
        self, db: AsyncSession, model: type[ModelType], *, commit: bool = True
    ) -> None:
        self.db = db
        self.model = model
        self.commit = commit
        self._pk = sa_inspect(model).primary_key[0]

    async def _commit(self) -> None:
        if self.commit:
            await self.db.commit()

    async def exists(self, entity_id: Any) -> bool:
        """Return True if a record with this primary key exists."""
        result = await self.db.execute(
            select(self._pk).where(self._pk == entity_id).limit(1)
        )
        return result.first() is not None

    async def get_by_id(self, entity_id: Any) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self.db.get(self.model, entity_id)

    async def get_all(self) -> list[ModelType]:
        """Return every record ordered by primary key."""
        result = await self.db.execute(select(self.model).order_by(self._pk))
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> SaveResult[ModelType]:
        """Insert a new record; UniqueViolation when a unique constraint fails."""
        try:
            async with self.db.begin_nested():
                self.db.add(obj)
                await self.db.flush()
        except IntegrityError as exc:
            violation = _unique_violation_from(exc)
            if violation is None:
                raise
            return violation
        await self.db.refresh(obj)
        await self._commit()
        return Saved(obj)

    async def update(self, obj: ModelType) -> SaveResult[ModelType]:
        """Replace an existing record (merge by primary key).

        The caller checks existence first; merge would otherwise insert.
        """
        try:
            async with self.db.begin_nested():
                merged = await self.db.merge(obj)
                await self.db.flush()
        except IntegrityError as exc:
            violation = _unique_violation_from(exc)
            if violation is None:
                raise
            return violation
        await self.db.refresh(merged)
        await self._commit()
        return Saved(merged)

    async def delete_by_id(self, entity_id: Any) -> bool:
        """Delete by primary key; return True if a record was removed."""
        obj = await self.get_by_id(entity_id)
        if obj is None:
            return False
        await self.db.delete(obj)
        await self.db.flush()
        await self._commit()
        return True
