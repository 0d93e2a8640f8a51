"""Tag value and the table it is stored in."""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


@dataclass
class Tag:
    """
    Тег: имя, время добавления и флаг авторизации.

    Обычное значение без идентичности кроме имени. TagStore заполняет его
    из строки таблицы вручную, поле за полем.

    Пример:
        tag = Tag(name="golang")
        tag = await store.retrieve(tag)
        print(tag.authorized)  # True / False
    """

    name: str = ""
    added: datetime | None = None
    authorized: bool = False


class TagRecord(Base):
    """Mapping of the ``tag`` table (used to build statements and create the schema)."""

    __tablename__ = "tag"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    authorized: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    # Текст в формате "YYYY-MM-DD HH:MM:SS"
    added: Mapped[str] = mapped_column(String(19), nullable=False)

    def __repr__(self) -> str:
        return f"<TagRecord(name='{self.name}', authorized={self.authorized})>"
