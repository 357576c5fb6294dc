
import contextlib
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import (AsyncConnection, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from taskpilot_db.models import Base


def get_db_url(user: str, password: str, ip: str, port: int, name: str) -> str:
    return f"postgresql+asyncpg://{user}:{password}@{ip}:{port}/{name}"


class DatabaseSessionManager:
    def __init__(self, url: str, engine_kwargs: dict[str, Any] | None = None):
        self._engine = create_async_engine(url, **(engine_kwargs or {}))
        self._sessionmaker = async_sessionmaker(bind=self._engine,
                                                autoflush=False,
                                                expire_on_commit=False)

    async def close(self) -> None:
        await self._engine.dispose()

    @contextlib.asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        async with self._engine.begin() as connection:
            yield connection

    async def create_all(self) -> None:
        async with self.connect() as connection:
            await connection.run_sync(Base.metadata.create_all)

    @contextlib.asynccontextmanager
    async def context_session(self) -> AsyncIterator[AsyncSession]:
        session = self._sessionmaker()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.context_session() as session:
            yield session
