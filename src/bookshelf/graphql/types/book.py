"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Books
    from .user import User


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    name: str
    pages: int
    user_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: "Books") -> "Book":
        return cls(
            id=strawberry.ID(str(record.id)),
            name=record.name,
            pages=record.pages,
            user_id=record.user_id,
        )

    @strawberry.field
    async def user(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:  # noqa: E501
        """Get the user this book belongs to."""
        from ..resolvers.book import resolve_book_user

        return await resolve_book_user(self, info)
