"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
import strawberry

from bookshelf.database.connection import create_tables
from bookshelf.database.gateway import StorageGateway
from bookshelf.graphql.schema import build_schema


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """A throwaway SQLite database file for one test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'bookshelf_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def store(database_url: str) -> AsyncGenerator[StorageGateway, None]:
    """Provide a storage gateway over a freshly created schema."""
    gateway = StorageGateway.from_url(database_url)
    await create_tables(gateway.engine)
    yield gateway
    await gateway.dispose()


@pytest.fixture(scope="session")
def schema() -> strawberry.Schema:
    """The composed GraphQL schema."""
    return build_schema()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
