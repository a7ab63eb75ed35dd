"""
Content GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Contents
    from .user import User


@strawberry.type
class Content:
    """Content document type for GraphQL API.

    `createdByUserId` and `lastUpdatedByUserId` are exposed as the referenced
    User objects, resolved from the raw ids kept in private attributes.
    `createdOn` / `updatedOn` are null unless the store has set them.
    """

    id: strawberry.ID
    content_type_id: str | None
    data: str | None
    created_on: datetime | None
    updated_on: datetime | None
    created_by_id: strawberry.Private[str | None]
    last_updated_by_id: strawberry.Private[str | None]

    @classmethod
    def from_record(cls, record: "Contents") -> "Content":
        return cls(
            id=strawberry.ID(str(record.id)),
            content_type_id=record.content_type_id,
            data=record.data,
            created_on=record.created_on,
            updated_on=record.updated_on,
            created_by_id=record.created_by_user_id,
            last_updated_by_id=record.last_updated_by_user_id,
        )

    @strawberry.field
    async def created_by_user_id(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:  # noqa: E501
        """Get the user who created this content."""
        from ..resolvers.content import resolve_content_created_by

        return await resolve_content_created_by(self, info)

    @strawberry.field
    async def last_updated_by_user_id(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:  # noqa: E501
        """Get the user who last updated this content."""
        from ..resolvers.content import resolve_content_last_updated_by

        return await resolve_content_last_updated_by(self, info)
