"""
UsersService tests against the in-memory repository
"""

from datetime import date

import pytest

from users_api.services.users_service import UsersService
from users_api.utils.errors import NotFoundError, StoreError, ValidationError


class TestUsersService:

    @pytest.mark.asyncio
    async def test_create_then_get(self, users_service):
        created = await users_service.create_user("Ada", date(2000, 6, 15))
        fetched = await users_service.get_user(created.id)

        assert fetched.name == "Ada"
        assert fetched.dob == date(2000, 6, 15)
        assert fetched.age == 24

    @pytest.mark.asyncio
    async def test_age_follows_clock(self, repository):
        await repository.create("Ada", date(2000, 6, 15))
        before = UsersService(repository, clock=lambda: date(2024, 6, 14))
        after = UsersService(repository, clock=lambda: date(2024, 6, 15))

        assert (await before.get_user(1)).age == 23
        assert (await after.get_user(1)).age == 24

    @pytest.mark.asyncio
    async def test_list_empty(self, users_service):
        assert await users_service.list_users() == []

    @pytest.mark.asyncio
    async def test_list_ordered_by_id(self, users_service):
        await users_service.create_user("Ada", date(2000, 1, 1))
        await users_service.create_user("Grace", date(1990, 1, 1))

        users = await users_service.list_users()
        assert [user.id for user in users] == [1, 2]
        assert [user.age for user in users] == [24, 34]

    @pytest.mark.asyncio
    async def test_update_overwrites(self, users_service):
        created = await users_service.create_user("Ada", date(2000, 1, 1))
        updated = await users_service.update_user(created.id, "Ada King", date(1999, 1, 1))

        assert updated.id == created.id
        assert updated.name == "Ada King"
        assert updated.age == 25

    @pytest.mark.asyncio
    async def test_update_missing_is_not_found(self, users_service, repository):
        with pytest.raises(NotFoundError):
            await users_service.update_user(42, "Nobody", date(2000, 1, 1))
        assert repository.mutations == 0

    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, users_service):
        created = await users_service.create_user("Ada", date(2000, 1, 1))
        await users_service.delete_user(created.id)

        with pytest.raises(NotFoundError):
            await users_service.get_user(created.id)

    @pytest.mark.asyncio
    async def test_store_error_passes_through(self, users_service, repository):
        repository.fail_with = OSError("connection refused")
        with pytest.raises(StoreError):
            await users_service.list_users()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,dob,field", [
        ("   ", date(2000, 1, 1), "name"),
        ("Ada", date(2024, 6, 16), "dob"),
        ("Ada", date(1899, 12, 31), "dob"),
    ])
    async def test_invalid_input_rejected_before_store(self, users_service, repository, name, dob, field):
        with pytest.raises(ValidationError) as exc_info:
            await users_service.create_user(name, dob)
        assert [detail["field"] for detail in exc_info.value.details] == [field]
        assert repository.mutations == 0

    @pytest.mark.asyncio
    async def test_overlong_name_rejected(self, users_service, repository):
        with pytest.raises(ValidationError):
            await users_service.create_user("a" * 256, date(2000, 1, 1))
        assert repository.mutations == 0

    @pytest.mark.asyncio
    async def test_ping_reports_store_failure(self, users_service, repository):
        await users_service.ping()

        repository.fail_with = OSError("connection refused")
        with pytest.raises(StoreError) as exc_info:
            await users_service.ping()
        assert exc_info.value.operation == "ping"
