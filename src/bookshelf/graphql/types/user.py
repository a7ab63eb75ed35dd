"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Users
    from .book import Book


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    email: str

    @classmethod
    def from_record(cls, record: "Users") -> "User":
        return cls(id=strawberry.ID(str(record.id)), email=record.email)

    @strawberry.field
    async def book(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")]] | None:  # noqa: E501
        """Get books that reference this user."""
        from ..resolvers.user import resolve_user_books

        return await resolve_user_books(self, info)
