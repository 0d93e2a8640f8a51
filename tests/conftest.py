"""
Pytest fixtures для тестов.

Предоставляет:
- test_engine: async engine для SQLite in-memory
- test_session_factory: фабрика сессий поверх test_engine
- test_db: изолированная сессия для каждого теста
"""

import pytest
import pytest_asyncio

from src.core.database import build_engine, build_session_factory, drop_db, init_db

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """
    Создаёт async engine для тестовой БД (SQLite in-memory).

    StaticPool обеспечивает что используется одно и то же соединение,
    что критично для in-memory БД (иначе данные теряются).
    Таблицы пересоздаются для каждого теста.
    """
    engine = build_engine(TEST_DATABASE_URL)
    await init_db(engine)

    yield engine

    await drop_db(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Фабрика сессий для тестовой БД."""
    return build_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_db(test_session_factory):
    """Предоставляет async session; изменения откатываются после теста."""
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="session")
def anyio_backend():
    """Используем asyncio для всех async тестов."""
    return "asyncio"
