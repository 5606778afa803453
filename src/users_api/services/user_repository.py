"""
Persistence gateway for the users table
"""

import asyncio
import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List, Optional, Protocol

import asyncpg

from users_api.config.settings import DB_STATEMENT_TIMEOUT
from users_api.models.user import User
from users_api.utils.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)

# users.id is a serial (int4) column
MAX_USER_ID = 2**31 - 1

# Driver and network failures surfaced as StoreError
STORE_EXCEPTIONS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class UserRepository(Protocol):
    """Capability required by UsersService; swap in any implementation"""

    async def create(self, name: str, dob: date) -> User: ...

    async def get_by_id(self, user_id: int) -> User: ...

    async def list(self) -> List[User]: ...

    async def update(self, user_id: int, name: str, dob: date) -> User: ...

    async def delete(self, user_id: int) -> None: ...

    async def ping(self) -> None: ...


class PostgresUserRepository:
    """asyncpg-backed UserRepository; one pooled connection per call"""

    def __init__(self, db_pool: asyncpg.Pool, timeout: Optional[float] = DB_STATEMENT_TIMEOUT):
        self.db_pool = db_pool
        self.timeout = timeout

    @staticmethod
    def _require_storable_id(user_id: int):
        # Ids outside the serial range cannot name a row
        if not 1 <= user_id <= MAX_USER_ID:
            raise NotFoundError(user_id)

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except STORE_EXCEPTIONS as e:
            raise StoreError(operation, e) from e

    async def create(self, name: str, dob: date) -> User:
        with self._store_errors("create"):
            async with self.db_pool.acquire(timeout=self.timeout) as conn:
                record = await conn.fetchrow("""
                    INSERT INTO users (name, dob)
                    VALUES ($1, $2)
                    RETURNING id, name, dob
                """, name, dob, timeout=self.timeout)

        user = User.from_record(record)
        logger.info(f"Created user {user.id}")
        return user

    async def get_by_id(self, user_id: int) -> User:
        self._require_storable_id(user_id)
        with self._store_errors("get_by_id"):
            async with self.db_pool.acquire(timeout=self.timeout) as conn:
                record = await conn.fetchrow(
                    "SELECT id, name, dob FROM users WHERE id = $1",
                    user_id, timeout=self.timeout
                )

        if record is None:
            raise NotFoundError(user_id)
        return User.from_record(record)

    async def list(self) -> List[User]:
        with self._store_errors("list"):
            async with self.db_pool.acquire(timeout=self.timeout) as conn:
                records = await conn.fetch(
                    "SELECT id, name, dob FROM users ORDER BY id ASC",
                    timeout=self.timeout
                )

        return [User.from_record(record) for record in records]

    async def update(self, user_id: int, name: str, dob: date) -> User:
        self._require_storable_id(user_id)
        with self._store_errors("update"):
            async with self.db_pool.acquire(timeout=self.timeout) as conn:
                record = await conn.fetchrow("""
                    UPDATE users
                    SET name = $2, dob = $3
                    WHERE id = $1
                    RETURNING id, name, dob
                """, user_id, name, dob, timeout=self.timeout)

        if record is None:
            raise NotFoundError(user_id)
        logger.info(f"Updated user {user_id}")
        return User.from_record(record)

    async def delete(self, user_id: int) -> None:
        self._require_storable_id(user_id)
        with self._store_errors("delete"):
            async with self.db_pool.acquire(timeout=self.timeout) as conn:
                status = await conn.execute(
                    "DELETE FROM users WHERE id = $1",
                    user_id, timeout=self.timeout
                )

        # Command tag has the form "DELETE <rowcount>"
        if status.split()[-1] == "0":
            raise NotFoundError(user_id)
        logger.info(f"Deleted user {user_id}")

    async def ping(self) -> None:
        with self._store_errors("ping"):
            async with self.db_pool.acquire(timeout=self.timeout) as conn:
                await conn.fetchval("SELECT 1", timeout=self.timeout)
