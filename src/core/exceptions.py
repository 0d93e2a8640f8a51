"""Errors raised or propagated by the tag store."""

from sqlalchemy.exc import SQLAlchemyError

# Ошибки хранилища пробрасываются без обёртки
StoreError = SQLAlchemyError


class InvalidArgumentError(ValueError):
    """
    Некорректный аргумент от вызывающего кода.

    Выбрасывается до обращения к БД (пустое имя тега, пустой поисковый запрос),
    поэтому хранилище никогда не остаётся в промежуточном состоянии.

    Использование:
        raise InvalidArgumentError("tag must have a name")
    """
