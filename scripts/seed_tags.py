#!/usr/bin/env python3
"""
Seed script: fill the tag table with a few authorized and pending tags.

Usage:
    python init_db.py
    python -m scripts.seed_tags
"""

import asyncio

from src.core.config import settings
from src.core.database import get_db
from src.core.logging import (
    correlation_id_var,
    generate_correlation_id,
    get_logger,
    setup_logging,
)
from src.models import Tag
from src.repositories import TagStore

logger = get_logger(__name__)

# (имя, авторизован)
TAGS = [
    ("python", True),
    ("golang", True),
    ("go", True),
    ("rust", False),
    ("java", False),
    ("javascript", True),
]


async def main():
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    correlation_id_var.set(generate_correlation_id())

    async for db in get_db():
        store = TagStore(db)
        for name, authorized in TAGS:
            await store.save(Tag(name=name, authorized=authorized))

    logger.info("Seeded tags", extra={"count": len(TAGS)})


if __name__ == "__main__":
    asyncio.run(main())
