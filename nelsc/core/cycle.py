"""
Calendar Cycle: три слоя нумерации NELSC

Слои: absolute day offset → absolute month offset → year.
- Day ↔ Month: 32-месячный паттерн short (28 дней) / long (35 дней)
  месяцев, 945 дней на паттерн
- Month ↔ Year: 11-летний span short (12 месяцев) / long (13 месяцев) лет,
  136 месяцев на span; 21 span = 231-летний паттерн (2857 месяцев), в
  котором последний год последнего span принудительно long

ТЕХНИКА BOOST/SINK:
    Точки выравнивания паттернов не совпадают с границами паттернов, поэтому
    индекс сначала сдвигается в неотрицательный домен (boost), раскладывается
    обычным делением с остатком и проходом по паттерну, после чего результат
    корректируется на соответствующую константу (sink). Константы boost/sink
    кодируют эпоху календаря и воспроизводятся точно.

    day ↔ month: boost только для отрицательных индексов
        DAY_UP_BOOST = 35910 дней = 38 паттернов ↔ MONTH_UP_SINK = 1216 месяцев
    month ↔ year: boost всегда
        MONTH_UP_BOOST = 1496 месяцев ↔ YEAR_UP_SINK = 121 год

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. month_to_day(day_to_month(d).month) + day_to_month(d).offset == d
2. day_to_month(month_to_day(m)) == (m, 0)
3. month_to_year(year_to_month(y)) == (y, 0)
4. Первый день MONTH_MIN == DAY_MIN, последний день MONTH_MAX == DAY_MAX
5. Индекс вне диапазона → ContractViolation (вызывающий код валидирует ввод)
"""

from typing import Final, NamedTuple, Optional

from nelsc.core.math.pattern_walk import sum_pattern, walk_pattern
from nelsc.core.math.safeguards import is_in_range, require_in_range

# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

DAY_MIN: Final[int] = -35364
DAY_MAX: Final[int] = 175020

MONTH_MIN: Final[int] = -1197
MONTH_MAX: Final[int] = 5926

YEAR_MIN: Final[int] = -96
YEAR_MAX: Final[int] = 479

# Смещение от Gregorian day 0 (1200-03-01) до NELSC day 0 (1925-02-02)
GREGORIAN_OFFSET: Final[int] = 264773

# =============================================================================
# ДЛИНЫ ЕДИНИЦ
# =============================================================================

DAYS_PER_SHORT_MONTH: Final[int] = 28
DAYS_PER_LONG_MONTH: Final[int] = 35

MONTHS_PER_SHORT_YEAR: Final[int] = 12
MONTHS_PER_LONG_YEAR: Final[int] = 13

# =============================================================================
# ПАТТЕРНЫ
# =============================================================================

# 32-месячный паттерн: "S" = 28 дней, "L" = 35 дней
MONTH_PATTERN: Final[str] = (
    "SSLS" "SSSLS"
    "SSLS" "SSSLS"
    "SSLS" "SSSLS"
    "SSSLS"
)
MONTH_PATTERN_LENGTH: Final[int] = 32
DAYS_PER_MONTH_PATTERN: Final[int] = 945

# 11-летний span: "S" = 12 месяцев, "L" = 13 месяцев
YEAR_SPAN_PATTERN: Final[str] = "SL" "SL" "SSL" "SSL" "S"
YEAR_SPAN_LENGTH: Final[int] = 11
MONTHS_PER_YEAR_SPAN: Final[int] = 136

# 231-летний паттерн: 21 span, последний год принудительно long
YEAR_PATTERN_LENGTH: Final[int] = 231
MONTHS_PER_YEAR_PATTERN: Final[int] = 2857

# =============================================================================
# ВЫРАВНИВАНИЕ (BOOST/SINK)
# =============================================================================

# От первого дня года 0 до absolute day 0
ABSOLUTE_DAY_OFFSET: Final[int] = 308

# От первого месяца года 0 до absolute month 0
ABSOLUTE_MONTH_OFFSET: Final[int] = 10

# day → month: boost отрицательного дня / sink результата
DAY_UP_BOOST: Final[int] = 35910
MONTH_UP_SINK: Final[int] = 1216

# month → year: boost всегда (начало 231-летнего паттерна за 121 год до года 0)
MONTH_UP_BOOST: Final[int] = 1496
YEAR_UP_SINK: Final[int] = 121

# year → month и month → day: обратные пары
YEAR_DOWN_BOOST: Final[int] = YEAR_UP_SINK
MONTH_DOWN_SINK: Final[int] = MONTH_UP_BOOST
MONTH_DOWN_BOOST: Final[int] = MONTH_UP_SINK
DAY_DOWN_SINK: Final[int] = DAY_UP_BOOST


# =============================================================================
# TYPES
# =============================================================================


class MonthPosition(NamedTuple):
    """Месяц, содержащий день, и смещение дня внутри месяца."""

    month: int  # Absolute month offset
    offset: int  # День внутри месяца (0 = первый)


class YearPosition(NamedTuple):
    """Год, содержащий месяц, и смещение месяца внутри года."""

    year: int  # Год NELSC
    offset: int  # Месяц внутри года (0 = первый)


# =============================================================================
# DAY ↔ MONTH
# =============================================================================


def day_to_month(day: int) -> MonthPosition:
    """
    Месяц, содержащий absolute day offset.

    Args:
        day: Absolute day offset в [DAY_MIN, DAY_MAX]

    Returns:
        MonthPosition(month, offset)

    Raises:
        ContractViolation: если day вне диапазона

    Examples:
        >>> day_to_month(0)
        MonthPosition(month=0, offset=14)
        >>> day_to_month(-35364)
        MonthPosition(month=-1197, offset=0)
    """
    require_in_range(day, "absolute day offset", DAY_MIN, DAY_MAX)

    # Относительно первого дня года 0
    day += ABSOLUTE_DAY_OFFSET

    boosted = day < 0
    if boosted:
        day += DAY_UP_BOOST

    patterns, day = divmod(day, DAYS_PER_MONTH_PATTERN)
    position = walk_pattern(
        MONTH_PATTERN, day, DAYS_PER_SHORT_MONTH, DAYS_PER_LONG_MONTH
    )

    month = patterns * MONTH_PATTERN_LENGTH + position.units
    if boosted:
        month -= MONTH_UP_SINK

    return MonthPosition(month=month - ABSOLUTE_MONTH_OFFSET, offset=position.remainder)


def month_to_day(month: int) -> int:
    """
    Absolute day offset первого дня месяца.

    Raises:
        ContractViolation: если month вне [MONTH_MIN, MONTH_MAX]

    Examples:
        >>> month_to_day(0)
        -14
        >>> month_to_day(-1197)
        -35364
    """
    require_in_range(month, "absolute month offset", MONTH_MIN, MONTH_MAX)

    # Относительно первого месяца года 0
    month += ABSOLUTE_MONTH_OFFSET

    boosted = month < 0
    if boosted:
        month += MONTH_DOWN_BOOST

    patterns, month = divmod(month, MONTH_PATTERN_LENGTH)
    day = patterns * DAYS_PER_MONTH_PATTERN + sum_pattern(
        MONTH_PATTERN, month, DAYS_PER_SHORT_MONTH, DAYS_PER_LONG_MONTH
    )

    if boosted:
        day -= DAY_DOWN_SINK

    return day - ABSOLUTE_DAY_OFFSET


# =============================================================================
# MONTH ↔ YEAR
# =============================================================================


def month_to_year(month: int) -> YearPosition:
    """
    Год, содержащий absolute month offset.

    Последний месяц 231-летнего паттерна: 13-й месяц принудительно
    длинного года; он обрабатывается отдельно, минуя проход по span.

    Raises:
        ContractViolation: если month вне [MONTH_MIN, MONTH_MAX]

    Examples:
        >>> month_to_year(0)
        YearPosition(year=0, offset=10)
        >>> month_to_year(5926)
        YearPosition(year=479, offset=12)
    """
    require_in_range(month, "absolute month offset", MONTH_MIN, MONTH_MAX)

    month += ABSOLUTE_MONTH_OFFSET + MONTH_UP_BOOST

    patterns, month = divmod(month, MONTHS_PER_YEAR_PATTERN)
    year = patterns * YEAR_PATTERN_LENGTH

    if month == MONTHS_PER_YEAR_PATTERN - 1:
        # Принудительно long последний год паттерна
        return YearPosition(
            year=year + YEAR_PATTERN_LENGTH - 1 - YEAR_UP_SINK,
            offset=MONTHS_PER_LONG_YEAR - 1,
        )

    spans, month = divmod(month, MONTHS_PER_YEAR_SPAN)
    position = walk_pattern(
        YEAR_SPAN_PATTERN, month, MONTHS_PER_SHORT_YEAR, MONTHS_PER_LONG_YEAR
    )

    year += spans * YEAR_SPAN_LENGTH + position.units
    return YearPosition(year=year - YEAR_UP_SINK, offset=position.remainder)


def year_to_month(year: int) -> int:
    """
    Absolute month offset первого месяца года.

    Остаток после деления на span всегда меньше 11, поэтому
    принудительно long последний год в сумму не попадает.

    Raises:
        ContractViolation: если year вне [YEAR_MIN, YEAR_MAX]

    Examples:
        >>> year_to_month(0)
        -10
        >>> year_to_month(-96)
        -1197
    """
    require_in_range(year, "year", YEAR_MIN, YEAR_MAX)

    year += YEAR_DOWN_BOOST

    patterns, year = divmod(year, YEAR_PATTERN_LENGTH)
    spans, year = divmod(year, YEAR_SPAN_LENGTH)

    month = (
        patterns * MONTHS_PER_YEAR_PATTERN
        + spans * MONTHS_PER_YEAR_SPAN
        + sum_pattern(
            YEAR_SPAN_PATTERN, year, MONTHS_PER_SHORT_YEAR, MONTHS_PER_LONG_YEAR
        )
    )

    return month - MONTH_DOWN_SINK - ABSOLUTE_MONTH_OFFSET


# =============================================================================
# LONG / SHORT
# =============================================================================


def is_long_month(month: int) -> bool:
    """
    Long ли месяц (35 дней).

    Для MONTH_MAX начало следующего месяца: DAY_MAX + 1.

    Raises:
        ContractViolation: если month вне диапазона
    """
    require_in_range(month, "absolute month offset", MONTH_MIN, MONTH_MAX)

    begin = month_to_day(month)
    if month < MONTH_MAX:
        following = month_to_day(month + 1)
    else:
        following = DAY_MAX + 1

    return following - begin > DAYS_PER_SHORT_MONTH


def is_long_year(year: int) -> bool:
    """
    Long ли год (13 месяцев).

    Для YEAR_MAX начало следующего года: MONTH_MAX + 1.

    Raises:
        ContractViolation: если year вне диапазона
    """
    require_in_range(year, "year", YEAR_MIN, YEAR_MAX)

    begin = year_to_month(year)
    if year < YEAR_MAX:
        following = year_to_month(year + 1)
    else:
        following = MONTH_MAX + 1

    return following - begin > MONTHS_PER_SHORT_YEAR


def month_length(month: int) -> int:
    """Число дней в месяце: 28 или 35."""
    return DAYS_PER_LONG_MONTH if is_long_month(month) else DAYS_PER_SHORT_MONTH


def year_length(year: int) -> int:
    """Число месяцев в году: 12 или 13."""
    return MONTHS_PER_LONG_YEAR if is_long_year(year) else MONTHS_PER_SHORT_YEAR


# =============================================================================
# NELSC ↔ GREGORIAN OFFSET
# =============================================================================


def to_gregorian_offset(day: int) -> int:
    """
    NELSC absolute day → Gregorian day offset.

    Raises:
        ContractViolation: если day вне [DAY_MIN, DAY_MAX]

    Examples:
        >>> to_gregorian_offset(0)
        264773
    """
    require_in_range(day, "absolute day offset", DAY_MIN, DAY_MAX)
    return day + GREGORIAN_OFFSET


def from_gregorian_offset(offset: int) -> Optional[int]:
    """
    Gregorian day offset → NELSC absolute day.

    Returns:
        Absolute day offset, или None если день вне диапазона NELSC
        (1828-04-07 .. 2404-04-11)
    """
    day = offset - GREGORIAN_OFFSET
    if not is_in_range(day, DAY_MIN, DAY_MAX):
        return None
    return day
