"""
Full Moon: недели полнолуния NELSC

Каждый месяц NELSC несёт неделю полнолуния на фиксированном сдвиге от
первого дня: третья неделя короткого месяца, четвёртая неделя длинного.
Полнолуние не всегда приходится на эту неделю (приближение, не астрономия).
"""

from dataclasses import dataclass
from typing import List

from nelsc.core.cycle import (
    MONTH_MAX,
    MONTH_MIN,
    is_long_month,
    month_to_day,
    to_gregorian_offset,
)
from nelsc.core.domain.reports import FullMoonWeek
from nelsc.core.gregorian import offset_to_date
from nelsc.core.math.safeguards import require, require_in_range
from nelsc.infrastructure.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FullMoonConfig:
    """Конфигурация недели полнолуния.

    Сдвиги в днях от первого дня месяца, включительно.
    """

    short_begin: int = 14
    short_end: int = 20
    long_begin: int = 21
    long_end: int = 27


DEFAULT_FULL_MOON_CONFIG = FullMoonConfig()


# =============================================================================
# REPORT
# =============================================================================


def full_moon_week(month: int, config: FullMoonConfig = DEFAULT_FULL_MOON_CONFIG) -> FullMoonWeek:
    """
    Неделя полнолуния одного absolute month.

    Raises:
        ContractViolation: если month вне [MONTH_MIN, MONTH_MAX]

    Examples:
        >>> week = full_moon_week(0)
        >>> (week.begin, week.end)
        ('1925-02-02', '1925-02-08')
    """
    require_in_range(month, "absolute month offset", MONTH_MIN, MONTH_MAX)

    first_day = month_to_day(month)
    if is_long_month(month):
        begin, end = first_day + config.long_begin, first_day + config.long_end
    else:
        begin, end = first_day + config.short_begin, first_day + config.short_end

    return FullMoonWeek(
        absolute_month=month,
        begin=str(offset_to_date(to_gregorian_offset(begin))),
        end=str(offset_to_date(to_gregorian_offset(end))),
    )


def full_moon_weeks(
    first_month: int,
    last_month: int,
    config: FullMoonConfig = DEFAULT_FULL_MOON_CONFIG,
) -> List[FullMoonWeek]:
    """
    Недели полнолуния месяцев first_month..last_month включительно.

    Args:
        first_month: Первый absolute month
        last_month: Последний absolute month (>= first_month)
        config: Сдвиги недели полнолуния

    Returns:
        Список FullMoonWeek в порядке месяцев

    Raises:
        ContractViolation: если месяцы вне диапазона или first_month > last_month
    """
    require_in_range(first_month, "first month", MONTH_MIN, MONTH_MAX)
    require_in_range(last_month, "last month", MONTH_MIN, MONTH_MAX)
    require(
        first_month <= last_month,
        f"first month {first_month} exceeds last month {last_month}",
    )

    logger.debug("full moon weeks for months %d..%d", first_month, last_month)
    return [full_moon_week(month, config) for month in range(first_month, last_month + 1)]
