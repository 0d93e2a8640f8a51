"""Core application components."""

from .config import Settings, settings
from .database import AsyncSessionLocal, drop_db, engine, get_db, init_db
from .exceptions import InvalidArgumentError, StoreError

__all__ = [
    "settings",
    "Settings",
    "engine",
    "AsyncSessionLocal",
    "get_db",
    "init_db",
    "drop_db",
    "InvalidArgumentError",
    "StoreError",
]
