"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.book import Book
from ..types.content import Content
from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addUser")
    async def add_user(self, info: strawberry.Info, email: str) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, email)

    @strawberry.mutation(name="addBook")
    async def add_book(
        self, info: strawberry.Info, name: str, pages: int, user_id: strawberry.ID
    ) -> Book:
        """Create a new book owned by `userId`. The user is not checked for existence."""
        from ..resolvers.book import create_book

        return await create_book(info, name, pages, user_id)

    @strawberry.mutation(name="addContent")
    async def add_content(
        self,
        info: strawberry.Info,
        content_type_id: str,
        data: str,
        created_by_user_id: strawberry.ID,
        last_updated_by_user_id: strawberry.ID,
    ) -> Content:
        """Create a new content document."""
        from ..resolvers.content import create_content

        return await create_content(
            info, content_type_id, data, created_by_user_id, last_updated_by_user_id
        )
