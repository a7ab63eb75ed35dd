"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book
from ..types.content import Content
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def book(self, info: strawberry.Info, id: strawberry.ID | None = None) -> Book | None:
        """Get a book by ID."""
        from ..resolvers.book import resolve_book_by_id

        return await resolve_book_by_id(info, id)

    @strawberry.field
    async def books(self, info: strawberry.Info) -> list[Book] | None:
        """Get all books."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    @strawberry.field
    async def user(self, info: strawberry.Info, id: strawberry.ID | None = None) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, id)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User] | None:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def content(
        self, info: strawberry.Info, id: strawberry.ID | None = None
    ) -> Content | None:
        """Get a content document by ID."""
        from ..resolvers.content import resolve_content_by_id

        return await resolve_content_by_id(info, id)
