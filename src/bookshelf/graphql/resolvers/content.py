from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.gateway import canonical_reference
from ...logging import get_logger
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.content import Content
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_content_by_id(info: strawberry.Info, id: str | None) -> Content | None:
    """Resolve a content document by its ID. A missing document resolves to None."""
    from ..types.content import Content as ContentType

    store = get_store_from_info(info)
    record = await store.contents.find_by_id(id)
    if record is None:
        return None
    return ContentType.from_record(record)


# Field resolvers
async def _resolve_referenced_user(info: strawberry.Info, user_id: str | None) -> User | None:
    from ..types.user import User as UserType

    if not user_id:
        return None
    store = get_store_from_info(info)
    record = await store.users.find_by_id(user_id)
    if record is None:
        logger.info("Content references unknown user", user_id=user_id)
        return None
    return UserType.from_record(record)


async def resolve_content_created_by(content: Content, info: strawberry.Info) -> User | None:
    """Resolve the user referenced by the content's createdByUserId."""
    return await _resolve_referenced_user(info, content.created_by_id)


async def resolve_content_last_updated_by(content: Content, info: strawberry.Info) -> User | None:
    """Resolve the user referenced by the content's lastUpdatedByUserId."""
    return await _resolve_referenced_user(info, content.last_updated_by_id)


# Mutation resolvers
async def create_content(
    info: strawberry.Info,
    content_type_id: str,
    data: str,
    created_by_user_id: str,
    last_updated_by_user_id: str,
) -> Content:
    """
    Persist a new content document.

    createdOn / updatedOn are left unset; the store may default them.
    """
    from ..types.content import Content as ContentType

    store = get_store_from_info(info)
    record = await store.contents.create(
        content_type_id=content_type_id,
        data=data,
        created_by_user_id=canonical_reference(created_by_user_id),
        last_updated_by_user_id=canonical_reference(last_updated_by_user_id),
    )
    logger.debug("Content stored without timestamps", content_id=str(record.id))
    return ContentType.from_record(record)
