"""
Скрипт для инициализации базы данных.

Создаёт таблицу tag напрямую через SQLAlchemy (для локальной разработки и тестов).
"""

import asyncio

from src.core.config import settings
from src.core.database import init_db
from src.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def main():
    """Создать все таблицы."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger.info("Creating tables", extra={"database_url": settings.DATABASE_URL})
    await init_db()
    logger.info("Tables created")


if __name__ == "__main__":
    asyncio.run(main())
