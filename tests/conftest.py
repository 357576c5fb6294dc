from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from taskpilot.db import session_manager
from taskpilot.depends import get_policy
from taskpilot.main import app
from taskpilot.policy import MembershipPolicy
from taskpilot_db.database import DatabaseSessionManager

from .utils import Account, register


@pytest.fixture
async def db() -> AsyncIterator[DatabaseSessionManager]:
    manager = DatabaseSessionManager("sqlite+aiosqlite://",
                                     {"poolclass": StaticPool,
                                      "connect_args": {"check_same_thread": False}})
    await manager.create_all()
    app.dependency_overrides[session_manager.session] = manager.session
    yield manager
    app.dependency_overrides.clear()
    await manager.close()


@pytest.fixture
async def client(db: DatabaseSessionManager) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app),
                           base_url="http://test") as ac:
        yield ac


@pytest.fixture
def membership_policy(db: DatabaseSessionManager) -> None:
    app.dependency_overrides[get_policy] = lambda: MembershipPolicy()


@pytest.fixture
async def alice(client: AsyncClient) -> Account:
    return await register(client, "alice")


@pytest.fixture
async def bob(client: AsyncClient) -> Account:
    return await register(client, "bob")
