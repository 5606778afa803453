"""
Live PostgreSQL tests for PostgresUserRepository
Skipped unless TEST_DATABASE_URL points at a disposable database.
"""

import os
from datetime import date

import pytest
import pytest_asyncio

from users_api.database.connection import init_database, close_database
from users_api.services.user_repository import PostgresUserRepository
from users_api.utils.errors import NotFoundError

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set")


@pytest_asyncio.fixture
async def repo():
    db_pool = await init_database(TEST_DATABASE_URL)
    async with db_pool.acquire() as conn:
        await conn.execute("TRUNCATE users RESTART IDENTITY")
    try:
        yield PostgresUserRepository(db_pool, timeout=5)
    finally:
        await close_database(db_pool)


class TestPostgresRoundTrip:

    @pytest.mark.asyncio
    async def test_crud_lifecycle(self, repo):
        assert await repo.list() == []

        created = await repo.create("Ada", date(2000, 6, 15))
        assert created.id > 0
        assert await repo.get_by_id(created.id) == created

        updated = await repo.update(created.id, "Ada King", date(1999, 1, 1))
        assert updated.id == created.id
        assert updated.dob == date(1999, 1, 1)

        await repo.delete(created.id)
        with pytest.raises(NotFoundError):
            await repo.get_by_id(created.id)

    @pytest.mark.asyncio
    async def test_missing_ids(self, repo):
        with pytest.raises(NotFoundError):
            await repo.update(12345, "Nobody", date(2000, 1, 1))
        with pytest.raises(NotFoundError):
            await repo.delete(12345)
        assert await repo.list() == []

    @pytest.mark.asyncio
    async def test_list_ordered(self, repo):
        first = await repo.create("Ada", date(2000, 1, 1))
        second = await repo.create("Grace", date(1990, 1, 1))
        assert [user.id for user in await repo.list()] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_text_is_stored_verbatim(self, repo):
        name = "Robert'); DROP TABLE users; --"
        created = await repo.create(name, date(2000, 1, 1))
        assert (await repo.get_by_id(created.id)).name == name
