"""
Tests for the storage gateway against a SQLite database
"""

import uuid

import pytest

from bookshelf.database.gateway import (
    MalformedIdError,
    StorageGateway,
    StoreReadError,
    StoreWriteError,
    canonical_reference,
    parse_id,
)


class TestParseId:
    def test_accepts_uuid_string(self):
        value = uuid.uuid4()
        assert parse_id("User", str(value)) == value

    def test_passes_uuid_through(self):
        value = uuid.uuid4()
        assert parse_id("User", value) is value

    def test_rejects_malformed_id(self):
        with pytest.raises(MalformedIdError) as exc_info:
            parse_id("Book", "not-an-id")

        assert exc_info.value.entity == "Book"
        assert exc_info.value.value == "not-an-id"
        assert isinstance(exc_info.value, ValueError)


class TestCanonicalReference:
    def test_alternate_uuid_spellings_collapse(self):
        value = uuid.uuid4()

        for spelling in (str(value).upper(), value.hex, "{%s}" % value, value.urn):
            assert canonical_reference(spelling) == str(value)

    def test_non_uuid_kept_verbatim(self):
        assert canonical_reference("not-a-user-id") == "not-a-user-id"


@pytest.mark.integration
class TestEntityRepository:
    @pytest.mark.asyncio
    async def test_create_assigns_id(self, store: StorageGateway):
        user = await store.users.create(email="a@x.com")

        assert isinstance(user.id, uuid.UUID)
        assert user.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_find_by_id_returns_created_record(self, store: StorageGateway):
        book = await store.books.create(name="Go", pages=300, user_id="someone")

        found = await store.books.find_by_id(str(book.id))

        assert found is not None
        assert found.id == book.id
        assert found.name == "Go"
        assert found.pages == 300
        assert found.user_id == "someone"

    @pytest.mark.asyncio
    async def test_find_by_id_miss_returns_none(self, store: StorageGateway):
        assert await store.users.find_by_id(str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_find_by_id_none_returns_none(self, store: StorageGateway):
        assert await store.contents.find_by_id(None) is None

    @pytest.mark.asyncio
    async def test_find_by_id_malformed_raises(self, store: StorageGateway):
        with pytest.raises(MalformedIdError):
            await store.users.find_by_id("12345")

    @pytest.mark.asyncio
    async def test_find_by_filter_matches_equal_columns(self, store: StorageGateway):
        await store.books.create(name="A", pages=1, user_id="u1")
        await store.books.create(name="B", pages=2, user_id="u1")
        await store.books.create(name="C", pages=3, user_id="u2")

        books = await store.books.find_by_filter(user_id="u1")

        assert sorted(book.name for book in books) == ["A", "B"]

    @pytest.mark.asyncio
    async def test_find_by_filter_without_criteria_returns_all(self, store: StorageGateway):
        await store.users.create(email="a@x.com")
        await store.users.create(email="b@x.com")

        users = await store.users.find_by_filter()

        assert {user.email for user in users} == {"a@x.com", "b@x.com"}

    @pytest.mark.asyncio
    async def test_find_by_filter_empty_store_returns_empty_list(self, store: StorageGateway):
        assert await store.books.find_by_filter() == []

    @pytest.mark.asyncio
    async def test_content_timestamps_stay_unset(self, store: StorageGateway):
        content = await store.contents.create(
            content_type_id="article",
            data="hello",
            created_by_user_id="u1",
            last_updated_by_user_id="u2",
        )

        found = await store.contents.find_by_id(content.id)

        assert found is not None
        assert found.created_on is None
        assert found.updated_on is None

    @pytest.mark.asyncio
    async def test_constraint_violation_raises_write_error(self, store: StorageGateway):
        with pytest.raises(StoreWriteError):
            await store.users.create(email=None)

        assert await store.users.find_by_filter() == []


@pytest.mark.integration
class TestStoreUnavailable:
    @pytest.mark.asyncio
    async def test_read_failure_raises_read_error(self, database_url: str):
        # Tables were never created, so every query fails
        gateway = StorageGateway.from_url(database_url)
        try:
            with pytest.raises(StoreReadError):
                await gateway.users.find_by_id(str(uuid.uuid4()))
            with pytest.raises(StoreReadError):
                await gateway.books.find_by_filter(user_id="u1")
        finally:
            await gateway.dispose()

    @pytest.mark.asyncio
    async def test_write_failure_raises_write_error(self, database_url: str):
        gateway = StorageGateway.from_url(database_url)
        try:
            with pytest.raises(StoreWriteError):
                await gateway.users.create(email="a@x.com")
        finally:
            await gateway.dispose()
