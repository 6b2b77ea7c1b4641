"""
Inputs: разбор пользовательского ввода для отчётов и CLI

Тонкий слой над sentinel-парсерами ядра: допускает окружающие пробелы
(ASCII whitespace) и превращает отказ разбора в CalendarInputError с
сообщением для пользователя.
"""

import re
from typing import Final, NamedTuple, Optional, Pattern

from nelsc.core.base24 import BASE24_PAIR_LENGTH, digit_to_value, pair_to_value
from nelsc.core.cycle import from_gregorian_offset
from nelsc.core.date_format import DATE_LENGTH
from nelsc.core.date_format import scan_date as scan_nelsc_date
from nelsc.core.gregorian import scan_date as scan_gregorian_date

# ASCII whitespace (C locale)
WHITESPACE: Final[str] = " \t\n\v\f\r"

_DECIMAL_RE: Final[Pattern[str]] = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*")

DATE_RANGE_NOTE: Final[str] = (
    "(Note: Gregorian dates must be in range 1828-04-07 to 2404-04-11.)"
)


class CalendarInputError(ValueError):
    """Пользовательский ввод не разбирается или вне допустимого диапазона."""


class DigitInput(NamedTuple):
    """Разобранная base-24 цифра: символ как введён и его значение."""

    char: str
    value: int


def _only_whitespace(text: str) -> bool:
    return not text.strip(WHITESPACE)


# =============================================================================
# DECIMAL
# =============================================================================


def parse_decimal(
    text: str,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
    name: str = "argument",
) -> int:
    """
    Знаковое десятичное целое с окружающими пробелами.

    Args:
        text: Ввод
        min_value: Нижняя граница (включительно), если задана
        max_value: Верхняя граница (включительно), если задана
        name: Имя аргумента для сообщений

    Raises:
        CalendarInputError: если ввод не целое число или вне диапазона

    Examples:
        >>> parse_decimal(" -96 ")
        -96
    """
    match = _DECIMAL_RE.fullmatch(text)
    if match is None:
        raise CalendarInputError(f"Could not parse {name} as decimal integer!")
    value = int(match.group(1))

    if (min_value is not None and value < min_value) or (
        max_value is not None and value > max_value
    ):
        raise CalendarInputError(
            f"{name.capitalize()} must be in range {min_value} to {max_value}!"
        )
    return value


# =============================================================================
# BASE-24
# =============================================================================


def parse_pair(text: str) -> int:
    """
    Знаковая base-24 пара: ведущие пробелы, ровно две цифры, хвостовые пробелы.

    Raises:
        CalendarInputError: если ввод не пара

    Examples:
        >>> parse_pair("  rY ")
        479
    """
    body = text.lstrip(WHITESPACE)
    value = pair_to_value(body) if body else None
    if value is None or not _only_whitespace(body[BASE24_PAIR_LENGTH:]):
        raise CalendarInputError("Could not parse as a base-24 pair!")
    return value


def parse_digit(text: str) -> DigitInput:
    """
    Одна base-24 цифра среди пробелов.

    Raises:
        CalendarInputError: если непробельных символов не ровно один
            или символ не base-24 цифра
    """
    chars = [char for char in text if char not in WHITESPACE]
    if len(chars) > 1:
        raise CalendarInputError("Provide no more than one base-24 digit!")
    if not chars:
        raise CalendarInputError("Provide a base-24 digit!")

    value = digit_to_value(chars[0])
    if value is None:
        raise CalendarInputError("Could not parse as base-24 digit!")
    return DigitInput(char=chars[0], value=value)


# =============================================================================
# CALENDAR DATE
# =============================================================================


def _scan_calendar_date(text: str) -> Optional[int]:
    body_start = len(text) - len(text.lstrip(WHITESPACE))
    if body_start == len(text):
        return None

    # Две независимые попытки: сначала NELSC, затем григорианская
    day = scan_nelsc_date(text, body_start)
    if day is not None:
        end = body_start + DATE_LENGTH
    else:
        scanned = scan_gregorian_date(text, body_start)
        if scanned is None:
            return None
        day = from_gregorian_offset(scanned.offset)
        if day is None:
            return None
        end = scanned.end

    if not _only_whitespace(text[end:]):
        return None
    return day


def parse_calendar_date(text: str) -> int:
    """
    Дата NELSC ("YY:MW-D") или григорианская (YYYY-MM-DD) → absolute day.

    Окружающие пробелы допускаются. Григорианская дата должна лежать в
    диапазоне NELSC.

    Raises:
        CalendarInputError: если ввод не дата либо дата вне диапазона

    Examples:
        >>> parse_calendar_date(" 1925-02-02")
        0
        >>> parse_calendar_date("00:B3-1 ")
        0
    """
    day = _scan_calendar_date(text)
    if day is None:
        raise CalendarInputError(
            f"Could not parse as a valid calendar date!\n{DATE_RANGE_NOTE}"
        )
    return day
