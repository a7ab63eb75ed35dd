from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.gateway import canonical_reference
from ...logging import get_logger
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.book import Book
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_book_by_id(info: strawberry.Info, id: str | None) -> Book | None:
    """Resolve a book by its ID. A missing book resolves to None."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    record = await store.books.find_by_id(id)
    if record is None:
        return None
    return BookType.from_record(record)


async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every stored book."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    records = await store.books.find_by_filter()
    return [BookType.from_record(record) for record in records]


# Field resolvers
async def resolve_book_user(book: Book, info: strawberry.Info) -> User | None:
    """
    Resolve the user a book belongs to.

    The reference is not checked when the book is written, so a dangling
    userId resolves to None instead of failing the parent book.
    """
    from ..types.user import User as UserType

    store = get_store_from_info(info)
    record = await store.users.find_by_id(book.user_id)
    if record is None:
        logger.info("Book references unknown user", book_id=book.id, user_id=book.user_id)
        return None
    return UserType.from_record(record)


# Mutation resolvers
async def create_book(info: strawberry.Info, name: str, pages: int, user_id: str) -> Book:
    """Persist a new book. The referenced user is not looked up first."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    record = await store.books.create(
        name=name, pages=pages, user_id=canonical_reference(user_id)
    )
    return BookType.from_record(record)
