"""Storage gateway: per-entity create / find-by-id / find-by-filter over SQLAlchemy."""

from __future__ import annotations

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ..dbmodels import Base, Books, Contents, Users
from ..logging import get_logger
from .connection import create_engine, create_session_factory, session_scope

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class StoreError(Exception):
    """Base class for storage gateway failures."""


class StoreReadError(StoreError):
    """A lookup failed because the store could not be read."""


class StoreWriteError(StoreError):
    """A record could not be persisted."""


class MalformedIdError(StoreError, ValueError):
    """An identifier does not have the store's id shape."""

    def __init__(self, entity: str, value: Any):
        super().__init__(f"Malformed {entity} id: {value!r}")
        self.entity = entity
        self.value = value


def parse_id(entity: str, value: str | UUID) -> UUID:
    """Convert an opaque client id into the store's UUID key."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise MalformedIdError(entity, value) from e


def canonical_reference(value: str | UUID) -> str:
    """Spell a stored reference the way record ids render, or keep it verbatim.

    References are not checked for existence, so a value that is not a UUID
    is still accepted as written.
    """
    try:
        return str(UUID(str(value)))
    except ValueError:
        return str(value)


class EntityRepository(Generic[ModelT]):
    """Create and look up records of one entity."""

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession], model: type[ModelT], entity: str
    ):
        self._session_factory = session_factory
        self.model = model
        self.entity = entity

    async def create(self, **values: Any) -> ModelT:
        """Persist one record and return it with its store-assigned id."""
        record = self.model(**values)
        try:
            async with session_scope(self._session_factory) as session:
                session.add(record)
                await session.flush()
        except SQLAlchemyError as e:
            logger.error("Store write failed", entity=self.entity, error=str(e))
            raise StoreWriteError(f"Could not create {self.entity}: {e}") from e

        logger.info(f"{self.entity} created", id=str(record.id))
        return record

    async def find_by_id(self, id: str | UUID | None) -> ModelT | None:
        """Return the record with this id, or None when it does not exist."""
        if id is None:
            return None
        key = parse_id(self.entity, id)
        try:
            async with session_scope(self._session_factory) as session:
                record = await session.get(self.model, key)
        except SQLAlchemyError as e:
            logger.error("Store read failed", entity=self.entity, id=str(key), error=str(e))
            raise StoreReadError(f"Could not read {self.entity} {key}: {e}") from e

        if record is None:
            logger.info(f"{self.entity} not found", id=str(key))
        return record

    async def find_by_filter(self, **criteria: Any) -> list[ModelT]:
        """Return all records whose columns equal the given values."""
        stmt = select(self.model).filter_by(**criteria)
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(stmt)
                records = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Store read failed", entity=self.entity, criteria=criteria, error=str(e))
            raise StoreReadError(f"Could not list {self.entity}: {e}") from e

        return records


class StorageGateway:
    """The persistence interface consumed by the GraphQL resolvers."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.users: EntityRepository[Users] = EntityRepository(session_factory, Users, "User")
        self.books: EntityRepository[Books] = EntityRepository(session_factory, Books, "Book")
        self.contents: EntityRepository[Contents] = EntityRepository(
            session_factory, Contents, "Content"
        )

    @classmethod
    def from_url(cls, database_url: str | None = None) -> StorageGateway:
        """Build a gateway with its own engine for the given (or configured) URL."""
        return cls(create_session_factory(create_engine(database_url)))

    @property
    def engine(self) -> AsyncEngine:
        return self.session_factory.kw["bind"]

    async def dispose(self) -> None:
        """Release the engine's pooled connections."""
        await self.engine.dispose()
