"""
pytest configuration and fixtures for the Users API test suite
"""

from datetime import date

import httpx
import pytest
import pytest_asyncio

from fakes import InMemoryUserRepository
from users_api.app import create_app
from users_api.services.users_service import UsersService

# Fixed evaluation date so derived ages are stable
TODAY = date(2024, 6, 15)


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def users_service(repository):
    return UsersService(repository, clock=lambda: TODAY)


@pytest.fixture
def app(repository, users_service):
    application = create_app(repository)
    application.state.users_service = users_service
    return application


@pytest_asyncio.fixture
async def client(app):
    """HTTP client bound to the ASGI app, no network involved"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
