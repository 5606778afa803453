"""
Database connection and pool management
"""

import asyncpg
import logging

from users_api.config.settings import DB_POOL_MIN_SIZE, DB_POOL_MAX_SIZE, DB_STATEMENT_TIMEOUT

logger = logging.getLogger(__name__)

USERS_TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS users (
        id SERIAL PRIMARY KEY,
        name TEXT NOT NULL,
        dob DATE NOT NULL
    )
"""


async def init_database(database_url: str) -> asyncpg.Pool:
    """Create the connection pool and make sure the users table exists"""
    db_pool = await asyncpg.create_pool(
        database_url,
        min_size=DB_POOL_MIN_SIZE,
        max_size=DB_POOL_MAX_SIZE,
        command_timeout=DB_STATEMENT_TIMEOUT,
        statement_cache_size=0  # pgbouncer compatibility
    )

    try:
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
            await conn.execute(USERS_TABLE_DDL)
    except Exception:
        await db_pool.close()
        raise

    logger.info("Database initialized successfully")
    return db_pool


async def close_database(db_pool: asyncpg.Pool):
    """Close database connection pool"""
    if db_pool:
        await db_pool.close()
    logger.info("Database connections closed")
