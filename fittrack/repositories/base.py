import logging
from typing import Any, Iterable, List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Общая обвязка над AsyncSession: ошибки SQLAlchemy -> PersistenceError."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _scalars(self, stmt) -> List[Any]:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Ошибка чтения из БД")
            raise PersistenceError(f"Query failed: {e}") from e
        return list(result.scalars().all())

    async def _scalar_one_or_none(self, stmt) -> Optional[Any]:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Ошибка чтения из БД")
            raise PersistenceError(f"Query failed: {e}") from e
        return result.scalars().first()

    async def _scalar(self, stmt) -> Any:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("Ошибка чтения из БД")
            raise PersistenceError(f"Query failed: {e}") from e
        return result.scalar_one()

    def add(self, instance: Any) -> None:
        self.db.add(instance)

    async def commit(self, restore: Iterable[Any] = ()) -> None:
        """
        Зафиксировать транзакцию.

        При ошибке транзакция откатывается, а объекты из restore
        перечитываются из БД, чтобы в памяти не остались несохранённые значения.
        """
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.exception("Ошибка сохранения в БД")
            await self._rollback(restore)
            raise PersistenceError(f"Commit failed: {e}") from e

    async def _rollback(self, restore: Iterable[Any]) -> None:
        try:
            await self.db.rollback()
            for instance in restore:
                if instance is not None and inspect(instance).persistent:
                    await self.db.refresh(instance)
        except SQLAlchemyError:
            logger.exception("Не удалось откатить транзакцию")

    async def refresh(self, instance: Any) -> None:
        try:
            await self.db.refresh(instance)
        except SQLAlchemyError as e:
            logger.exception("Ошибка чтения из БД")
            raise PersistenceError(f"Refresh failed: {e}") from e
