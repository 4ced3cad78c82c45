"""Generic SQLAlchemy implementations of the entity repository protocols."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any, Generic, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]

ModelT = TypeVar("ModelT")


class SqlAlchemyRepository(Generic[ModelT]):
    """Entity store backed by one mapped table with an integer ``id``."""

    model: type[Any]

    def __init__(self, get_db_session: SessionFactory):
        """Initialize the repository.

        Args:
            get_db_session: Function returning a session context manager.
                Every call opens its own session.
        """
        self.get_db_session = get_db_session

    async def exists(self, entity_id: int) -> bool:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(exists().where(self.model.id == entity_id))
            )
            return bool(result.scalar())

    async def get(self, entity_id: int) -> ModelT | None:
        async with self.get_db_session() as session:
            return await session.get(self.model, entity_id)

    async def list_all(self) -> list[ModelT]:
        async with self.get_db_session() as session:
            result = await session.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())


class NamedSqlAlchemyRepository(SqlAlchemyRepository[ModelT]):
    """Entity store whose table has a unique ``name`` column."""

    async def exists_by_name(self, name: str) -> bool:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(exists().where(self.model.name == name))
            )
            return bool(result.scalar())

    async def get_by_name(self, name: str) -> ModelT | None:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(self.model).where(self.model.name == name)
            )
            return result.scalars().first()
