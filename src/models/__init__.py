"""Models for the tag store."""

from .base import Base, utc_now
from .tag import Tag, TagRecord

__all__ = [
    "Base",
    "utc_now",
    "Tag",
    "TagRecord",
]
