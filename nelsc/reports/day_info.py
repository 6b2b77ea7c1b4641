"""
Day Info: сводка по одному дню NELSC

Собирает все представления absolute day offset: absolute month, запись
"YY:MW-D", поля года/месяца/дня, long/short флаги и григорианскую дату.
"""

from nelsc.core.cycle import (
    DAY_MAX,
    DAY_MIN,
    day_to_month,
    is_long_month,
    is_long_year,
    month_to_day,
    month_to_year,
    to_gregorian_offset,
)
from nelsc.core.date_format import format_date
from nelsc.core.domain.reports import DayInfo
from nelsc.core.gregorian import offset_to_date
from nelsc.core.math.safeguards import require_in_range
from nelsc.infrastructure.logging import get_logger

logger = get_logger(__name__)


def build_day_info(day: int) -> DayInfo:
    """
    Сводка по absolute day offset.

    Args:
        day: Absolute day offset в [DAY_MIN, DAY_MAX]

    Returns:
        DayInfo

    Raises:
        ContractViolation: если day вне диапазона NELSC

    Examples:
        >>> build_day_info(0).nelsc_date
        '00:B3-1'
        >>> build_day_info(0).gregorian_date
        '1925-02-02'
    """
    require_in_range(day, "absolute day offset", DAY_MIN, DAY_MAX)

    month_position = day_to_month(day)
    year_position = month_to_year(month_position.month)
    gregorian = offset_to_date(to_gregorian_offset(day))

    info = DayInfo(
        day_offset=day,
        absolute_month=month_position.month,
        nelsc_date=format_date(
            year_position.year, year_position.offset, month_position.offset
        ),
        year=year_position.year,
        month_of_year=year_position.offset,
        day_of_month=month_position.offset,
        long_month=is_long_month(month_position.month),
        long_year=is_long_year(year_position.year),
        gregorian_date=str(gregorian),
    )
    logger.debug("day %d -> %s / %s", day, info.nelsc_date, info.gregorian_date)
    return info


def build_month_info(month: int) -> DayInfo:
    """
    Сводка по первому дню absolute month.

    Raises:
        ContractViolation: если month вне [MONTH_MIN, MONTH_MAX]
    """
    return build_day_info(month_to_day(month))
