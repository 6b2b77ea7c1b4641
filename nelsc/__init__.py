"""
NELSC: движок лунно-солнечного календаря NELSC

Слои:
- nelsc.core.base24: base-24 цифры и знаковые пары
- nelsc.core.gregorian: пролептический григорианский календарь
- nelsc.core.cycle: дни / месяцы / годы NELSC
- nelsc.core.date_format: запись даты "YY:MW-D"
- nelsc.reports: сводки и таблицы поверх движка
- nelsc.cli: командная строка
"""

from nelsc.core.base24 import (
    BASE24_ALPHABET,
    BASE24_DIGIT_MAX,
    BASE24_PAIR_MAX,
    BASE24_PAIR_MIN,
    digit_to_value,
    pair_to_value,
    print_pair,
    value_to_digit,
    value_to_pair,
)
from nelsc.core.cycle import (
    DAY_MAX,
    DAY_MIN,
    GREGORIAN_OFFSET,
    MONTH_MAX,
    MONTH_MIN,
    YEAR_MAX,
    YEAR_MIN,
    MonthPosition,
    YearPosition,
    day_to_month,
    from_gregorian_offset,
    is_long_month,
    is_long_year,
    month_to_day,
    month_to_year,
    to_gregorian_offset,
    year_to_month,
)
from nelsc.core.date_format import compose_day, decompose_day
from nelsc.core.date_format import format_date as format_nelsc_date
from nelsc.core.date_format import print_date as print_nelsc_date
from nelsc.core.date_format import scan_date as scan_nelsc_date
from nelsc.core.domain import GregorianDate, NelscDate
from nelsc.core.gregorian import GREGORIAN_DAY_MAX, GREGORIAN_DAY_MIN, GregorianScan
from nelsc.core.gregorian import date_to_offset as gregorian_date_to_offset
from nelsc.core.gregorian import format_date as format_gregorian_date
from nelsc.core.gregorian import is_leap_year
from nelsc.core.gregorian import offset_to_date as gregorian_offset_to_date
from nelsc.core.gregorian import print_date as print_gregorian_date
from nelsc.core.gregorian import scan_date as scan_gregorian_date
from nelsc.core.math.safeguards import ContractViolation
from nelsc.core.sink import OutputWriteError

__version__ = "1.0.0"

__all__ = [
    # Errors
    "ContractViolation",
    "OutputWriteError",
    # Base24
    "BASE24_ALPHABET",
    "BASE24_DIGIT_MAX",
    "BASE24_PAIR_MAX",
    "BASE24_PAIR_MIN",
    "digit_to_value",
    "pair_to_value",
    "print_pair",
    "value_to_digit",
    "value_to_pair",
    # Gregorian
    "GREGORIAN_DAY_MAX",
    "GREGORIAN_DAY_MIN",
    "GregorianDate",
    "GregorianScan",
    "format_gregorian_date",
    "gregorian_date_to_offset",
    "gregorian_offset_to_date",
    "is_leap_year",
    "print_gregorian_date",
    "scan_gregorian_date",
    # Cycle
    "DAY_MAX",
    "DAY_MIN",
    "GREGORIAN_OFFSET",
    "MONTH_MAX",
    "MONTH_MIN",
    "YEAR_MAX",
    "YEAR_MIN",
    "MonthPosition",
    "YearPosition",
    "day_to_month",
    "from_gregorian_offset",
    "is_long_month",
    "is_long_year",
    "month_to_day",
    "month_to_year",
    "to_gregorian_offset",
    "year_to_month",
    # Date format
    "NelscDate",
    "compose_day",
    "decompose_day",
    "format_nelsc_date",
    "print_nelsc_date",
    "scan_nelsc_date",
]
