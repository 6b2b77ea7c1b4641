"""
New Year: таблица первых дней годов NELSC

Для каждого года NELSC: григорианская дата первого дня и сдвиг месяца
равноденствия относительно первого месяца года. Равноденствие
аппроксимируется фиксированной датой 20 марта.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Одна строка на каждый год YEAR_MIN..YEAR_MAX, по возрастанию
2. Для первого года равноденствие лежит до начала календаря: сдвиг = -1
3. Диапазоны first day / сдвигов покрывают все строки
"""

from dataclasses import dataclass
from typing import List

from nelsc.core.base24 import value_to_pair
from nelsc.core.cycle import (
    YEAR_MAX,
    YEAR_MIN,
    day_to_month,
    from_gregorian_offset,
    month_to_day,
    to_gregorian_offset,
    year_to_month,
)
from nelsc.core.domain.reports import NewYearChart, NewYearEntry
from nelsc.core.gregorian import date_to_offset, offset_to_date
from nelsc.core.math.safeguards import require
from nelsc.infrastructure.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EquinoxConfig:
    """Конфигурация приближения мартовского равноденствия.

    Равноденствие всегда в марте и обычно 20-го или в пределах дня от него.
    """

    month: int = 3
    day: int = 20


DEFAULT_EQUINOX_CONFIG = EquinoxConfig()


# =============================================================================
# REPORT
# =============================================================================


def _equinox_month(gregorian_year: int, config: EquinoxConfig) -> int:
    """Absolute month, в котором лежит равноденствие григорианского года."""
    offset = date_to_offset(gregorian_year, config.month, config.day)
    require(offset is not None, f"invalid equinox date {config.month}-{config.day}")

    day = from_gregorian_offset(offset)
    require(day is not None, f"equinox of {gregorian_year} outside NELSC range")
    return day_to_month(day).month


def new_year_entry(year: int, config: EquinoxConfig = DEFAULT_EQUINOX_CONFIG) -> NewYearEntry:
    """
    Строка таблицы для одного года.

    Raises:
        ContractViolation: если year вне [YEAR_MIN, YEAR_MAX]

    Examples:
        >>> entry = new_year_entry(-96)
        >>> (entry.year_pair, entry.first_day, entry.equinox_month_offset)
        ('T0', '1828-04-07', -1)
    """
    first_month = year_to_month(year)
    first_day = offset_to_date(to_gregorian_offset(month_to_day(first_month)))

    if year > YEAR_MIN:
        equinox_month = _equinox_month(first_day.year, config)
    else:
        equinox_month = first_month - 1

    return NewYearEntry(
        year=year,
        year_pair=value_to_pair(year),
        first_day=str(first_day),
        equinox_month_offset=equinox_month - first_month,
    )


def build_new_year_chart(config: EquinoxConfig = DEFAULT_EQUINOX_CONFIG) -> NewYearChart:
    """
    Таблица первых дней всех годов NELSC.

    Args:
        config: Приближение равноденствия

    Returns:
        NewYearChart с YEAR_MAX - YEAR_MIN + 1 строками и сводными диапазонами
    """
    entries: List[NewYearEntry] = [
        new_year_entry(year, config) for year in range(YEAR_MIN, YEAR_MAX + 1)
    ]

    # "YYYY-MM-DD" -> "MM-DD"; лексикографический порядок совпадает с календарным
    month_days = [entry.first_day[5:] for entry in entries]
    offsets = [entry.equinox_month_offset for entry in entries]

    chart = NewYearChart(
        entries=entries,
        earliest_first_day=min(month_days),
        latest_first_day=max(month_days),
        min_equinox_month_offset=min(offsets),
        max_equinox_month_offset=max(offsets),
    )
    logger.debug(
        "new year chart: %d years, first day %s..%s, equinox offsets [%d, %d]",
        len(entries),
        chart.earliest_first_day,
        chart.latest_first_day,
        chart.min_equinox_month_offset,
        chart.max_equinox_month_offset,
    )
    return chart
