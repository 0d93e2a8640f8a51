"""Database engine and session wiring for callers of the tag store."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from .config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Создать async engine для строки подключения.

    SQLite (в том числе :memory:) работает через одно соединение (StaticPool),
    для PostgreSQL / MySQL пул отключён (NullPool): пулом управляет инфраструктура.
    """
    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, echo=echo, poolclass=NullPool)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Фабрика сессий без autoflush и без expire после commit."""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(settings.DATABASE_URL, settings.DATABASE_ECHO)
AsyncSessionLocal = build_session_factory(engine)


async def get_db(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Выдать сессию как единицу работы: commit при успехе, rollback при ошибке.

    TagStore сам транзакции не завершает, поэтому запись попадает в БД
    только после выхода из этого генератора.

    Usage:
        async for db in get_db():
            await TagStore(db).save(Tag(name="python"))
    """
    factory = session_factory or AsyncSessionLocal
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Создать таблицу tag (и прочие таблицы из Base.metadata)."""
    from ..models import Base

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(bind: AsyncEngine | None = None) -> None:
    """Удалить все таблицы (use with caution!)."""
    from ..models import Base

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
