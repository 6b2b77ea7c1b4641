"""
Render: текстовые макеты отчётов

Каждая функция возвращает готовый текст с завершающим переводом строки;
запись в поток вывода делает вызывающий код (nelsc.core.sink.write_exact).
"""

from typing import Final, Iterable, List

from nelsc.core.base24 import value_to_digit, value_to_pair
from nelsc.core.domain.reports import DayInfo, FullMoonWeek, NewYearChart
from nelsc.reports.inputs import DigitInput

# Строк таблицы новых годов между пустыми строками
NEW_YEAR_GROUP_SIZE: Final[int] = 4

HELP_TEXT: Final[str] = """\
nelsc command summary:

  help - show this helpscreen.

  to24pair [i] - convert signed decimal integer i into a base-24
  pair in signed style.

  from24pair [p] - convert base-24 pair i in signed style into a
  signed decimal integer.  p must have exactly two base-24 digits.

  to24digit [i] - convert integer i into an unsigned base-24 digit.
  i must be in range 0-23.

  from24digit [d] - convert base-24 digit d into a decimal integer.
  d must contain only one base-24 digit.

  day [d] - provide information about the day indicated by NELSC
  absolute day offset d.

  month [m] - provide information about the first day of the month
  indicated by NELSC absolute month offset m.

  date [d] - provide information about a particular calendar date.
  The parameter d must be a NELSC date in 3T:C4-7 format, or a
  Gregorian date in YYYY-MM-DD format.

  fullmoon [m1] [m2] - return the Gregorian dates of the full moon
  weeks in NELSC from NELSC absolute month offset m1 up to m2.  The
  full moon does not always actually happen in the full moon week.

  newyear - create a chart of all NELSC years and the Gregorian date
  of the first day of the year for each year, along with minimum and
  maximum Gregorian month and day for the first day of the year, and
  for each year the offset from the first month that March 20
  (an approximation of the equinox) happens.

"""


def _length_word(is_long: bool) -> str:
    return "long" if is_long else "short"


# =============================================================================
# BASE-24
# =============================================================================


def render_to_pair(value: int) -> str:
    """Десятичное значение → пара."""
    return f"Decimal value:  {value}\nBase-24 pair:   {value_to_pair(value)}\n"


def render_from_pair(value: int) -> str:
    """Пара → десятичное значение; пара печатается в каноническом виде."""
    return f"Base-24 pair:   {value_to_pair(value)}\nDecimal value:  {value}\n"


def render_to_digit(value: int) -> str:
    """Десятичное значение → цифра."""
    return f"Decimal value:  {value}\nBase-24 digit:  {value_to_digit(value)}\n"


def render_from_digit(digit: DigitInput) -> str:
    """Цифра → десятичное значение; цифра печатается как введена."""
    return f"Base-24 digit:  {digit.char}\nDecimal value:  {digit.value}\n"


# =============================================================================
# REPORTS
# =============================================================================


def render_day_info(info: DayInfo) -> str:
    """
    Сводка по дню.

    Examples:
        >>> from nelsc.reports.day_info import build_day_info
        >>> print(render_day_info(build_day_info(0)), end="")
        Day offset:      0
        Absolute month:  0
        NELSC date:      00:B3-1
        Month length:    short
        Year length:     short
        Gregorian date:  1925-02-02
    """
    return (
        f"Day offset:      {info.day_offset}\n"
        f"Absolute month:  {info.absolute_month}\n"
        f"NELSC date:      {info.nelsc_date}\n"
        f"Month length:    {_length_word(info.long_month)}\n"
        f"Year length:     {_length_word(info.long_year)}\n"
        f"Gregorian date:  {info.gregorian_date}\n"
    )


def render_full_moon_weeks(weeks: Iterable[FullMoonWeek]) -> str:
    """
    Строки "YYYY-MM-DD - YYYY-MM-DD".

    Пустая строка перед неделей, первый день которой в другом
    григорианском году, чем у предыдущей.
    """
    lines: List[str] = []
    last_year = None
    for week in weeks:
        if last_year is not None and week.begin_year != last_year:
            lines.append("")
        last_year = week.begin_year
        lines.append(f"{week.begin} - {week.end}")
    return "".join(f"{line}\n" for line in lines)


def render_new_year_chart(chart: NewYearChart) -> str:
    """
    Таблица новых годов: группы по четыре строки, затем сводка диапазонов.
    """
    lines: List[str] = []
    for index, entry in enumerate(chart.entries):
        if index and index % NEW_YEAR_GROUP_SIZE == 0:
            lines.append("")
        lines.append(
            f"{entry.year_pair}  {entry.first_day}  "
            f"equinox month offset {entry.equinox_month_offset:2d}"
        )

    lines.append("")
    lines.append(
        f"Range of first day of year:  "
        f"{chart.earliest_first_day} - {chart.latest_first_day}"
    )
    lines.append(
        f"Range of equinox offsets:    "
        f"[{chart.min_equinox_month_offset}, {chart.max_equinox_month_offset}]"
    )
    return "".join(f"{line}\n" for line in lines)
