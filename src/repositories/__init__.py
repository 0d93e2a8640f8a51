"""Repository layer for data access."""

from .tag import TagStore

__all__ = [
    "TagStore",
]
