"""
Users API Server
CRUD over user records with a derived age field
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI

from users_api.config.settings import DB_STATEMENT_TIMEOUT, require_database_url
from users_api.database.connection import init_database, close_database
from users_api.api.routes import health, users
from users_api.services.user_repository import PostgresUserRepository, UserRepository
from users_api.services.users_service import UsersService
from users_api.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


@asynccontextmanager
async def postgres_lifespan(app: FastAPI):
    """Open the pool once per process and wire it into the service"""
    db_pool = await init_database(require_database_url())
    app.state.users_service = UsersService(PostgresUserRepository(db_pool, timeout=DB_STATEMENT_TIMEOUT))
    try:
        yield
    finally:
        await close_database(db_pool)


def create_app(repository: Optional[UserRepository] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        repository: Storage to serve from; when omitted a PostgreSQL pool
            is opened on startup from DATABASE_URL

    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title="Users API",
        description="Create, read, update, delete and list users with a derived age",
        version="1.0.0",
        lifespan=postgres_lifespan if repository is None else None
    )

    if repository is not None:
        app.state.users_service = UsersService(repository)

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix="/users", tags=["Users"])

    return app
