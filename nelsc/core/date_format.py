"""
Date Format: компактная запись даты NELSC "YY:MW-D"

Ровно 7 ASCII символов, поля на фиксированных позициях:

    позиция  0-1  YY  год, знаковая base-24 пара
    позиция  2    ":" разделитель
    позиция  3    M   месяц года, base-24 цифра (1 = первый месяц)
    позиция  4    W   неделя месяца, десятичная цифра 1..4 (1..5 в long)
    позиция  5    "-" разделитель
    позиция  6    D   день недели, десятичная цифра 1..7

Пример: "3V:14-1": год 93, первый месяц, четвёртая неделя, первый день.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scan_date(format_date(y, m, d)) == compose_day(NelscDate(y, m, d))
2. Диапазоны месяца/недели проверяются по фактической длине года/месяца
3. Чтение не выходит за конец строки и не пропускает пробелы
"""

from typing import Final, Optional, TextIO

from nelsc.core.base24 import digit_to_value, pair_to_value, value_to_digit, value_to_pair
from nelsc.core.cycle import (
    DAY_MAX,
    DAY_MIN,
    YEAR_MAX,
    YEAR_MIN,
    day_to_month,
    month_length,
    month_to_day,
    month_to_year,
    year_length,
    year_to_month,
)
from nelsc.core.domain.dates import NelscDate
from nelsc.core.math.digits import decimal_digit_value
from nelsc.core.math.safeguards import require, require_in_range, require_non_negative
from nelsc.core.sink import write_exact

# =============================================================================
# ФОРМАТ
# =============================================================================

# Число символов в записи даты
DATE_LENGTH: Final[int] = 7

DAYS_PER_WEEK: Final[int] = 7

YEAR_SEPARATOR: Final[str] = ":"
WEEK_SEPARATOR: Final[str] = "-"

# Позиции полей
YEAR_FIELD: Final[int] = 0
YEAR_SEPARATOR_POS: Final[int] = 2
MONTH_FIELD: Final[int] = 3
WEEK_FIELD: Final[int] = 4
WEEK_SEPARATOR_POS: Final[int] = 5
DAY_FIELD: Final[int] = 6


# =============================================================================
# КОМПОЗИЦИЯ / ДЕКОМПОЗИЦИЯ
# =============================================================================


def decompose_day(day: int) -> NelscDate:
    """
    Absolute day offset → (year, month, day) NELSC.

    Raises:
        ContractViolation: если day вне [DAY_MIN, DAY_MAX]
    """
    require_in_range(day, "absolute day offset", DAY_MIN, DAY_MAX)

    month_position = day_to_month(day)
    year_position = month_to_year(month_position.month)

    return NelscDate(
        year=year_position.year,
        month=year_position.offset,
        day=month_position.offset,
    )


def compose_day(date: NelscDate) -> int:
    """
    (year, month, day) NELSC → absolute day offset.

    Raises:
        ContractViolation: если month/day вне фактической длины года/месяца
    """
    require(
        date.month < year_length(date.year),
        f"month {date.month} out of range for year {date.year}",
    )
    month = year_to_month(date.year) + date.month
    require(
        date.day < month_length(month),
        f"day {date.day} out of range for absolute month {month}",
    )
    return month_to_day(month) + date.day


# =============================================================================
# ЗАПИСЬ
# =============================================================================


def format_date(year: int, month: int, day: int) -> str:
    """
    Запись даты NELSC.

    Args:
        year: Год NELSC
        month: Месяц года (0 = первый)
        day: День месяца (0 = первый)

    Returns:
        Строка из 7 символов "YY:MW-D"

    Raises:
        ContractViolation: если комбинация невалидна (13-й месяц короткого
            года, пятая неделя короткого месяца, отрицательные поля)

    Examples:
        >>> format_date(0, 10, 14)
        '00:B3-1'
    """
    require_in_range(year, "year", YEAR_MIN, YEAR_MAX)
    require_non_negative(month, "month")
    require_non_negative(day, "day")

    require(
        month < year_length(year),
        f"month {month} out of range for year {year}",
    )
    absolute_month = year_to_month(year) + month
    require(
        day < month_length(absolute_month),
        f"day {day} out of range for absolute month {absolute_month}",
    )

    week, day_of_week = divmod(day, DAYS_PER_WEEK)
    return (
        f"{value_to_pair(year)}{YEAR_SEPARATOR}{value_to_digit(month + 1)}"
        f"{week + 1}{WEEK_SEPARATOR}{day_of_week + 1}"
    )


def print_date(sink: TextIO, year: int, month: int, day: int) -> None:
    """
    Запись даты NELSC в sink.

    Raises:
        ContractViolation: если комбинация невалидна или sink is None
        OutputWriteError: если запись не удалась
    """
    write_exact(sink, format_date(year, month, day))


# =============================================================================
# ЧТЕНИЕ
# =============================================================================


def scan_date(text: str, pos: int = 0) -> Optional[int]:
    """
    Разбор даты NELSC начиная с позиции pos.

    Читается ровно DATE_LENGTH символов; всё после них игнорируется.
    Ведущие пробелы не пропускаются.

    Args:
        text: Строка для разбора
        pos: Позиция первого символа даты

    Returns:
        Absolute day offset, или None если запись некорректна либо дата
        не существует (13-й месяц короткого года, пятая неделя короткого
        месяца, день недели вне 1..7)

    Examples:
        >>> scan_date("00:B3-1")
        0
        >>> scan_date("00:B3 1") is None
        True
    """
    if pos < 0 or len(text) - pos < DATE_LENGTH:
        return None

    field = text[pos:pos + DATE_LENGTH]
    if (
        field[YEAR_SEPARATOR_POS] != YEAR_SEPARATOR
        or field[WEEK_SEPARATOR_POS] != WEEK_SEPARATOR
    ):
        return None

    year = pair_to_value(field, YEAR_FIELD)
    month = digit_to_value(field[MONTH_FIELD])
    week = decimal_digit_value(field[WEEK_FIELD])
    day_of_week = decimal_digit_value(field[DAY_FIELD])
    if year is None or month is None or week is None or day_of_week is None:
        return None

    # Любая валидная пара: валидный год
    if not 1 <= month <= year_length(year):
        return None
    absolute_month = year_to_month(year) + month - 1

    weeks = month_length(absolute_month) // DAYS_PER_WEEK
    if not 1 <= week <= weeks:
        return None

    if not 1 <= day_of_week <= DAYS_PER_WEEK:
        return None

    return (
        month_to_day(absolute_month)
        + (week - 1) * DAYS_PER_WEEK
        + (day_of_week - 1)
    )
