"""
Reports over the NELSC engine.

Day summaries, full moon weeks, the new year chart, user input parsing,
and the text layouts the CLI prints.
"""

from nelsc.reports.day_info import build_day_info, build_month_info
from nelsc.reports.full_moon import FullMoonConfig, full_moon_week, full_moon_weeks
from nelsc.reports.inputs import (
    CalendarInputError,
    DigitInput,
    parse_calendar_date,
    parse_decimal,
    parse_digit,
    parse_pair,
)
from nelsc.reports.new_year import EquinoxConfig, build_new_year_chart, new_year_entry

__all__ = [
    # Day info
    "build_day_info",
    "build_month_info",
    # Full moon
    "FullMoonConfig",
    "full_moon_week",
    "full_moon_weeks",
    # New year
    "EquinoxConfig",
    "build_new_year_chart",
    "new_year_entry",
    # Inputs
    "CalendarInputError",
    "DigitInput",
    "parse_calendar_date",
    "parse_decimal",
    "parse_digit",
    "parse_pair",
]
