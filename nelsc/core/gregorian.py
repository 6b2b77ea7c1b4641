"""
Gregorian Calendar: day offset ↔ (year, month, day)

Эпоха: day 0 = пролептическое 1200-03-01. Допустимый диапазон смещений
[GREGORIAN_DAY_MIN, GREGORIAN_DAY_MAX] = 1582-10-15 .. 9999-12-31.

Внутренние вычисления ведутся в мартовских годах: месяцы перенумерованы так,
что февраль переменной длины стоит последним, и високосный день всегда
оказывается последним днём периода.

ФОРМУЛЫ:
    quad century = 146097 дней (400 лет)
    century      = 36524 дней  (100 лет, кроме последнего в quad century)
    quad year    = 1461 дней   (4 года, кроме последнего в столетии)
    year         = 365 дней    (кроме последнего в quad year)

    offset → date: иерархическое деление; индекс столетия == 4 или индекс
    года == 4 означает високосный день в конце периода → clamp индекса
    на единицу и day = последний день периода.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. date_to_offset(*offset_to_date(d).as_tuple()) == d на всём диапазоне
2. Високосный год: делится на 4, кроме столетий, не делящихся на 400
3. Текстовый вывод: YYYY-MM-DD; ввод: YYYY ровно 4 цифры, MM/DD 1-2 цифры
"""

from typing import Final, NamedTuple, Optional, TextIO

from nelsc.core.domain.dates import GregorianDate
from nelsc.core.math.digits import decimal_digit_value
from nelsc.core.math.safeguards import require, require_in_range
from nelsc.core.sink import write_exact

# =============================================================================
# ДИАПАЗОН
# =============================================================================

# 1582-10-15: введение григорианского календаря
GREGORIAN_DAY_MIN: Final[int] = 139750

# 9999-12-31: дальше четырёхзначный год переполняется
GREGORIAN_DAY_MAX: Final[int] = 3214073

# Год дня 0 (мартовский)
BASE_YEAR: Final[int] = 1200

# Последний поддерживаемый год
MAX_YEAR: Final[int] = 9999

# =============================================================================
# МЕСЯЦЫ
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

# Сдвиг мартовского года относительно январского (в месяцах)
MONTH_OFFSET: Final[int] = 2

LONG_MONTH_DAYS: Final[int] = 31
SHORT_MONTH_DAYS: Final[int] = 30
LEAP_MONTH_DAYS: Final[int] = 29
NONLEAP_MONTH_DAYS: Final[int] = 28

# Длины месяцев мартовского года: "+" = 31, "-" = 30, "*" = февраль
MONTH_PATTERN: Final[str] = "+-+-++-+-++*"

# =============================================================================
# ПЕРИОДЫ
# =============================================================================

QUAD_CENTURY_DAYS: Final[int] = 146097
CENTURY_DAYS: Final[int] = 36524
QUAD_YEAR_DAYS: Final[int] = 1461
YEAR_DAYS: Final[int] = 365
LEAP_YEAR_DAYS: Final[int] = 366

CENTURIES_PER_QUAD_CENTURY: Final[int] = 4
QUAD_YEARS_PER_CENTURY: Final[int] = 25
YEARS_PER_QUAD_YEAR: Final[int] = 4

QUAD_CENTURY_YEARS: Final[int] = 400
CENTURY_YEARS: Final[int] = 100
QUAD_YEAR_YEARS: Final[int] = 4

# =============================================================================
# ТЕКСТОВЫЙ ФОРМАТ
# =============================================================================

DATE_SEPARATOR: Final[str] = "-"
YEAR_FIELD_LENGTH: Final[int] = 4
DAY_MONTH_FIELD_MAX_LENGTH: Final[int] = 2


class GregorianScan(NamedTuple):
    """Результат scan_date."""

    offset: int  # Gregorian day offset
    end: int  # Индекс первого символа после даты


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Високосный ли (январский) год.

    Raises:
        ContractViolation: если year < 1

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    require(year >= 1, f"year must be >= 1, got {year}")
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def month_length(index: int) -> int:
    """
    Длина месяца мартовского года.

    Args:
        index: Нуль-базированный индекс (0 = март, 11 = февраль)

    Returns:
        Число дней, или 0 для февраля (переменная длина)

    Raises:
        ContractViolation: если index вне [0, 11]
    """
    require_in_range(index, "March-based month index", 0, MONTHS_PER_YEAR - 1)

    symbol = MONTH_PATTERN[index]
    if symbol == "+":
        return LONG_MONTH_DAYS
    if symbol == "-":
        return SHORT_MONTH_DAYS
    require(symbol == "*", f"Unknown month pattern symbol {symbol!r}")
    return 0


def _scan_year(text: str, pos: int) -> Optional[int]:
    """Ровно четыре десятичные цифры; следующие символы игнорируются."""
    if len(text) - pos < YEAR_FIELD_LENGTH:
        return None

    year = 0
    for char in text[pos:pos + YEAR_FIELD_LENGTH]:
        digit = decimal_digit_value(char)
        if digit is None:
            return None
        year = year * 10 + digit

    return year


def _scan_day_month(text: str, pos: int) -> Optional[tuple[int, int]]:
    """Одна или две десятичные цифры; три и больше: отказ."""
    end = pos
    while end < len(text) and decimal_digit_value(text[end]) is not None:
        end += 1
        if end - pos > DAY_MONTH_FIELD_MAX_LENGTH:
            return None

    if end == pos:
        return None

    return int(text[pos:end]), end


# =============================================================================
# OFFSET ↔ DATE
# =============================================================================


def offset_to_date(offset: int) -> GregorianDate:
    """
    Декомпозиция Gregorian day offset в дату.

    Args:
        offset: Смещение в днях от 1200-03-01

    Returns:
        GregorianDate (месяц и день один-базированные)

    Raises:
        ContractViolation: если offset вне [GREGORIAN_DAY_MIN, GREGORIAN_DAY_MAX]

    Examples:
        >>> str(offset_to_date(139750))
        '1582-10-15'
        >>> str(offset_to_date(3214073))
        '9999-12-31'
    """
    require_in_range(offset, "Gregorian day offset", GREGORIAN_DAY_MIN, GREGORIAN_DAY_MAX)

    quad_centuries, offset = divmod(offset, QUAD_CENTURY_DAYS)
    centuries, offset = divmod(offset, CENTURY_DAYS)
    quad_years, offset = divmod(offset, QUAD_YEAR_DAYS)
    years, day = divmod(offset, YEAR_DAYS)

    # Високосный день в конце quad century
    if centuries == CENTURIES_PER_QUAD_CENTURY:
        centuries = CENTURIES_PER_QUAD_CENTURY - 1
        quad_years = QUAD_YEARS_PER_CENTURY - 1
        years = YEARS_PER_QUAD_YEAR - 1
        day = LEAP_YEAR_DAYS - 1

    # Високосный день в конце quad year
    if years == YEARS_PER_QUAD_YEAR:
        years = YEARS_PER_QUAD_YEAR - 1
        day = LEAP_YEAR_DAYS - 1

    year = (
        quad_centuries * QUAD_CENTURY_YEARS
        + centuries * CENTURY_YEARS
        + quad_years * QUAD_YEAR_YEARS
        + years
        + BASE_YEAR
    )

    # Месяц мартовского года; февраль последний и не проходится целиком
    month = 0
    while day > 0:
        length = month_length(month)
        if length == 0 or day < length:
            break
        month += 1
        day -= length

    # Мартовский месяц → январский
    month += MONTH_OFFSET
    if month >= MONTHS_PER_YEAR:
        month -= MONTHS_PER_YEAR
        year += 1

    return GregorianDate(year=year, month=month + 1, day=day + 1)


def date_to_offset(year: int, month: int, day: int) -> Optional[int]:
    """
    Композиция даты в Gregorian day offset.

    Args:
        year: Год (январская нумерация)
        month: Месяц 1..12
        day: День месяца (1 = первый)

    Returns:
        Gregorian day offset, или None если дата невалидна или вне
        [GREGORIAN_DAY_MIN, GREGORIAN_DAY_MAX]

    Examples:
        >>> date_to_offset(1582, 10, 15)
        139750
        >>> date_to_offset(1900, 2, 29) is None
        True
    """
    if year <= BASE_YEAR or month < 1 or day < 1:
        return None
    if year > MAX_YEAR or month > MONTHS_PER_YEAR:
        return None

    day -= 1

    # Январский месяц → мартовский
    month = month - 1 - MONTH_OFFSET
    if month < 0:
        year -= 1
        month += MONTHS_PER_YEAR

    # Февраль мартовского года year приходится на январский год year + 1
    length = month_length(month)
    if length == 0:
        length = LEAP_MONTH_DAYS if is_leap_year(year + 1) else NONLEAP_MONTH_DAYS

    if day >= length:
        return None

    year -= BASE_YEAR

    quad_centuries, year = divmod(year, QUAD_CENTURY_YEARS)
    centuries, year = divmod(year, CENTURY_YEARS)
    quad_years, year = divmod(year, QUAD_YEAR_YEARS)

    offset = (
        quad_centuries * QUAD_CENTURY_DAYS
        + centuries * CENTURY_DAYS
        + quad_years * QUAD_YEAR_DAYS
        + year * YEAR_DAYS
    )

    # До начала месяца; февраль последний и в сумму не попадает
    offset += sum(month_length(index) for index in range(month))
    offset += day

    if not GREGORIAN_DAY_MIN <= offset <= GREGORIAN_DAY_MAX:
        return None

    return offset


# =============================================================================
# ТЕКСТОВЫЙ ФОРМАТ
# =============================================================================


def format_date(year: int, month: int, day: int) -> str:
    """
    YYYY-MM-DD для валидной даты.

    Raises:
        ContractViolation: если дата невалидна или вне диапазона

    Examples:
        >>> format_date(1925, 2, 2)
        '1925-02-02'
    """
    require(
        date_to_offset(year, month, day) is not None,
        f"Invalid Gregorian date: year={year}, month={month}, day={day}",
    )
    return f"{year:04d}-{month:02d}-{day:02d}"


def print_date(sink: TextIO, year: int, month: int, day: int) -> None:
    """
    Запись YYYY-MM-DD в sink.

    Raises:
        ContractViolation: если дата невалидна или sink is None
        OutputWriteError: если запись не удалась
    """
    write_exact(sink, format_date(year, month, day))


def scan_date(text: str, pos: int = 0) -> Optional[GregorianScan]:
    """
    Разбор YYYY-MM-DD начиная с позиции pos.

    Ведущие пробелы не пропускаются. Разбор останавливается на первом
    несоответствующем символе; что стоит после даты: забота вызывающего
    кода (индекс возвращается в GregorianScan.end). Десятичная цифра сразу
    после поля дня считается частью поля.

    Args:
        text: Строка для разбора
        pos: Позиция первого символа года

    Returns:
        GregorianScan(offset, end), или None если разбор не удался или
        дата невалидна/вне диапазона

    Examples:
        >>> scan_date("1925-2-2 tail")
        GregorianScan(offset=264773, end=8)
        >>> scan_date(" 1925-02-02") is None
        True
    """
    if pos < 0:
        return None

    year = _scan_year(text, pos)
    if year is None:
        return None
    pos += YEAR_FIELD_LENGTH

    if text[pos:pos + 1] != DATE_SEPARATOR:
        return None
    pos += 1

    scanned = _scan_day_month(text, pos)
    if scanned is None:
        return None
    month, pos = scanned

    if text[pos:pos + 1] != DATE_SEPARATOR:
        return None
    pos += 1

    scanned = _scan_day_month(text, pos)
    if scanned is None:
        return None
    day, pos = scanned

    offset = date_to_offset(year, month, day)
    if offset is None:
        return None

    return GregorianScan(offset=offset, end=pos)
