"""Conversion between datetimes and the stored ``YYYY-MM-DD HH:MM:SS`` text."""

from datetime import UTC, datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    """
    Преобразовать datetime в строку для колонки added.

    Наивное время считается UTC, время с часовым поясом сначала
    переводится в UTC (как и utc_now()).

    Пример:
        format_timestamp(datetime(2023, 1, 15, 10, 0, 0))  # "2023-01-15 10:00:00"
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str | datetime) -> datetime:
    """
    Разобрать значение колонки added в datetime (точность до секунды).

    Драйвер может вернуть как строку, так и уже готовый datetime
    (если колонка в существующей БД объявлена как TIMESTAMP).
    """
    if isinstance(value, datetime):
        return value.replace(microsecond=0)
    # fromisoformat понимает и "T", и пробел, и дробные секунды
    return datetime.fromisoformat(value.strip()).replace(microsecond=0)
