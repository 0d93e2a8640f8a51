"""Tag store: retrieve, search and upsert tags."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Executable, Result, select
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import InvalidArgumentError
from ..core.logging import get_logger
from ..core.timestamps import format_timestamp, parse_timestamp
from ..models import Tag, TagRecord, utc_now

logger = get_logger(__name__)


class TagStore:
    """
    Хранилище тегов поверх таблицы ``tag``.

    Работает с уже открытой сессией: не открывает, не коммитит
    и не закрывает её. Управление транзакцией - задача вызывающего кода
    (например, get_db).

    Каждая операция - один SQL запрос с параметрами.

    Пример:
        store = TagStore(db)
        await store.save(Tag(name="rust", authorized=True, added=utc_now()))
        tags = await store.search_by_term("ru")
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def retrieve(self, tag: Tag) -> Tag:
        """
        Заполнить тег данными из БД по имени.

        Args:
            tag: Тег с заполненным name (остальные поля игнорируются)

        Returns:
            Тот же объект tag. Если строки нет - без изменений.

        Raises:
            InvalidArgumentError: Если у тега нет имени

        SQL эквивалент:
            SELECT name, authorized, added FROM tag WHERE name = :name;
        """
        if not tag.name:
            raise InvalidArgumentError("tag must have a name")

        stmt = select(TagRecord.name, TagRecord.authorized, TagRecord.added).where(
            TagRecord.name == tag.name
        )
        result = await self._execute("retrieve", stmt)
        row = result.mappings().first()

        if row is None:
            logger.debug("Tag not found", extra={"tag": tag.name})
            return tag

        return self._apply_row(tag, row)

    async def search_by_term(self, term: str) -> list[Tag]:
        """
        Найти теги, в имени которых встречается term.

        Args:
            term: Подстрока для поиска

        Returns:
            Список тегов (пустой, если ничего не найдено)

        Raises:
            InvalidArgumentError: Если term пустой

        SQL эквивалент:
            SELECT name, authorized, added FROM tag
            WHERE name LIKE '%' || :term || '%' ESCAPE '/';

        Сам term передаётся параметром, '%' добавляется в SQL.
        Символы '%' и '_' внутри term экранируются и ищутся буквально.
        Регистрозависимость определяется БД (в SQLite LIKE без учёта регистра).
        """
        if not term:
            raise InvalidArgumentError("search term required")

        stmt = select(TagRecord.name, TagRecord.authorized, TagRecord.added).where(
            TagRecord.name.contains(term, autoescape=True)
        )
        result = await self._execute("search_by_term", stmt)

        tags = [self._row_to_tag(row) for row in result.mappings().all()]
        logger.debug("Tag search finished", extra={"term": term, "found": len(tags)})
        return tags

    # camelCase-алиас
    searchByTerm = search_by_term

    async def save(self, tag: Tag) -> "TagStore":
        """
        Сохранить тег (upsert).

        Args:
            tag: Тег с name, authorized и added

        Returns:
            self (для цепочки вызовов)

        Raises:
            InvalidArgumentError: Если у тега нет имени

        Новая строка вставляется целиком. Если тег с таким name уже есть,
        обновляется только authorized, added остаётся прежним.
        Если added не задан, подставляется текущее время UTC.

        SQL эквивалент (SQLite / PostgreSQL):
            INSERT INTO tag (name, authorized, added)
            VALUES (:name, :authorized, :added)
            ON CONFLICT (name) DO UPDATE SET authorized = excluded.authorized;
        """
        if not tag.name:
            raise InvalidArgumentError("tag missing a name")

        if tag.added is None:
            tag.added = utc_now()

        values = {
            "name": tag.name,
            "authorized": 1 if tag.authorized else 0,
            "added": format_timestamp(tag.added),
        }
        await self._execute("save", self._upsert_statement(values))
        logger.debug("Tag saved", extra={"tag": tag.name, "authorized": tag.authorized})
        return self

    # Вспомогательные методы (private)

    def _upsert_statement(self, values: dict[str, Any]) -> Executable:
        """Собрать атомарный INSERT ... ON CONFLICT для диалекта текущей БД."""
        dialect = self.db.get_bind().dialect.name

        if dialect in ("sqlite", "postgresql"):
            insert = sqlite_insert if dialect == "sqlite" else pg_insert
            stmt = insert(TagRecord).values(**values)
            return stmt.on_conflict_do_update(
                index_elements=["name"],
                set_={"authorized": stmt.excluded.authorized},
            )

        if dialect in ("mysql", "mariadb"):
            stmt = mysql_insert(TagRecord).values(**values)
            return stmt.on_duplicate_key_update(authorized=stmt.inserted.authorized)

        raise NotImplementedError(f"Upsert is not supported for dialect '{dialect}'")

    async def _execute(self, operation: str, stmt: Executable) -> Result:
        """Выполнить запрос; ошибки БД логируются и пробрасываются как есть."""
        try:
            return await self.db.execute(stmt)
        except SQLAlchemyError:
            logger.error("Tag store query failed", extra={"operation": operation}, exc_info=True)
            raise

    @staticmethod
    def _apply_row(tag: Tag, row: Mapping[str, Any]) -> Tag:
        """Заполнить added и authorized из строки таблицы (1 -> True, иначе False)."""
        tag.added = parse_timestamp(row["added"])
        tag.authorized = row["authorized"] == 1
        return tag

    def _row_to_tag(self, row: Mapping[str, Any]) -> Tag:
        return self._apply_row(Tag(name=row["name"]), row)
