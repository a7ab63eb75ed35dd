"""
Executing GraphQL documents outside of HTTP
"""

from typing import TYPE_CHECKING, Any

import strawberry
from strawberry.types import ExecutionResult

from .context import build_context

if TYPE_CHECKING:
    from ..database.gateway import StorageGateway


async def execute_operation(
    schema: strawberry.Schema,
    document: str,
    *,
    store: "StorageGateway",
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> ExecutionResult:
    """Run one query or mutation document against the given storage gateway."""
    return await schema.execute(
        document,
        variable_values=variables,
        context_value=build_context(store),
        operation_name=operation_name,
    )


def result_to_dict(result: ExecutionResult) -> dict[str, Any]:
    """Render an execution result in the JSON shape served over HTTP."""
    payload: dict[str, Any] = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]
    return payload
