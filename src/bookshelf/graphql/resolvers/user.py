from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.book import Book
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_user_by_id(info: strawberry.Info, id: str | None) -> User | None:
    """Resolve a user by its ID. A missing user resolves to None."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    record = await store.users.find_by_id(id)
    if record is None:
        logger.info("User lookup missed", user_id=id)
        return None
    return UserType.from_record(record)


async def resolve_users(info: strawberry.Info) -> list[User]:
    """Resolve every stored user."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    records = await store.users.find_by_filter()
    return [UserType.from_record(record) for record in records]


# Field resolvers
async def resolve_user_books(user: User, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose userId references this user."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    records = await store.books.find_by_filter(user_id=str(user.id))
    logger.debug("Resolved books for user", user_id=user.id, count=len(records))
    return [BookType.from_record(record) for record in records]


# Mutation resolvers
async def create_user(info: strawberry.Info, email: str) -> User:
    """Persist a new user."""
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    record = await store.users.create(email=email)
    return UserType.from_record(record)
