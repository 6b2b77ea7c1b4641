"""
NELSC CLI - command-line interface for calendar conversions and reports.
"""

import argparse
import json
import os
import sys
from typing import Any, Callable, Final, List, Optional

from nelsc.core.base24 import BASE24_DIGIT_MAX, BASE24_PAIR_MAX, BASE24_PAIR_MIN
from nelsc.core.contracts import report_payload
from nelsc.core.cycle import DAY_MAX, DAY_MIN, MONTH_MAX, MONTH_MIN
from nelsc.core.domain.reports import DayInfo
from nelsc.core.sink import OutputWriteError, write_exact
from nelsc.infrastructure.logging import DEFAULT_LEVEL, LEVELS, get_logger, setup_logging
from nelsc.reports.day_info import build_day_info, build_month_info
from nelsc.reports.full_moon import full_moon_weeks
from nelsc.reports.inputs import (
    CalendarInputError,
    parse_calendar_date,
    parse_decimal,
    parse_digit,
    parse_pair,
)
from nelsc.reports.new_year import build_new_year_chart
from nelsc.reports.render import (
    HELP_TEXT,
    render_day_info,
    render_from_digit,
    render_from_pair,
    render_full_moon_weeks,
    render_new_year_chart,
    render_to_digit,
    render_to_pair,
)

logger = get_logger(__name__)

LOG_LEVEL_ENV = "NELSC_LOG_LEVEL"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _emit(text: str) -> None:
    write_exact(sys.stdout, text)


def _emit_json(data: Any) -> None:
    _emit(json.dumps(data, indent=2) + "\n")


def _emit_day_info(info: DayInfo, as_json: bool) -> None:
    if as_json:
        _emit_json(report_payload(info))
    else:
        _emit(render_day_info(info))


# =============================================================================
# SUBCOMMANDS
# =============================================================================


def cmd_help(args: argparse.Namespace) -> int:
    _emit(HELP_TEXT)
    return 0


def cmd_to24pair(args: argparse.Namespace) -> int:
    value = parse_decimal(args.value, BASE24_PAIR_MIN, BASE24_PAIR_MAX)
    _emit(render_to_pair(value))
    return 0


def cmd_from24pair(args: argparse.Namespace) -> int:
    _emit(render_from_pair(parse_pair(args.pair)))
    return 0


def cmd_to24digit(args: argparse.Namespace) -> int:
    value = parse_decimal(args.value, 0, BASE24_DIGIT_MAX)
    _emit(render_to_digit(value))
    return 0


def cmd_from24digit(args: argparse.Namespace) -> int:
    _emit(render_from_digit(parse_digit(args.digit)))
    return 0


def cmd_day(args: argparse.Namespace) -> int:
    day = parse_decimal(args.day, DAY_MIN, DAY_MAX)
    _emit_day_info(build_day_info(day), args.json)
    return 0


def cmd_month(args: argparse.Namespace) -> int:
    month = parse_decimal(args.month, MONTH_MIN, MONTH_MAX)
    _emit_day_info(build_month_info(month), args.json)
    return 0


def cmd_date(args: argparse.Namespace) -> int:
    _emit_day_info(build_day_info(parse_calendar_date(args.date)), args.json)
    return 0


def cmd_fullmoon(args: argparse.Namespace) -> int:
    first = parse_decimal(args.first, name="first argument")
    last = parse_decimal(args.last, name="second argument")
    if not (MONTH_MIN <= first <= MONTH_MAX and MONTH_MIN <= last <= MONTH_MAX):
        raise CalendarInputError(
            f"Arguments must be in range {MONTH_MIN} to {MONTH_MAX}!"
        )
    if last < first:
        raise CalendarInputError("Second argument must not be less than first!")

    weeks = full_moon_weeks(first, last)
    if args.json:
        _emit_json([report_payload(week) for week in weeks])
    else:
        _emit(render_full_moon_weeks(weeks))
    return 0


def cmd_newyear(args: argparse.Namespace) -> int:
    chart = build_new_year_chart()
    if args.json:
        _emit_json(report_payload(chart))
    else:
        _emit(render_new_year_chart(chart))
    return 0


# =============================================================================
# ARGUMENTS
# =============================================================================

# Имя, обработчик, краткое описание, позиционные аргументы
COMMANDS: Final = (
    ("help", cmd_help, "Show the command summary", ()),
    ("to24pair", cmd_to24pair, "Decimal integer to signed base-24 pair", ("value",)),
    ("from24pair", cmd_from24pair, "Signed base-24 pair to decimal integer", ("pair",)),
    ("to24digit", cmd_to24digit, "Decimal integer to base-24 digit", ("value",)),
    ("from24digit", cmd_from24digit, "Base-24 digit to decimal integer", ("digit",)),
    ("day", cmd_day, "Information about an absolute day offset", ("day",)),
    ("month", cmd_month, "Information about the first day of an absolute month", ("month",)),
    ("date", cmd_date, "Information about a calendar date", ("date",)),
    ("fullmoon", cmd_fullmoon, "Gregorian dates of full moon weeks", ("first", "last")),
    ("newyear", cmd_newyear, "Chart of the first day of every NELSC year", ()),
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Command arguments are collected verbatim, so values such as "-a4X" reach
    the input layer and are rejected there with the calendar diagnostic.
    """
    summary = "\n".join(f"  {name:<12} {text}" for name, _, text, _ in COMMANDS)
    parser = argparse.ArgumentParser(
        prog="nelsc",
        description="NELSC lunisolar calendar conversions and reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Commands:
{summary}

Examples:
  nelsc to24pair -96
  nelsc date 3V:14-1
  nelsc date 1925-02-02
  nelsc --json fullmoon 0 12
  nelsc newyear

Options go before the command. Run "nelsc help" for the full command summary.
""",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit day, month, date, fullmoon and newyear reports as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL),
        type=str.upper,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LEVEL})",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=[name for name, _, _, _ in COMMANDS],
        metavar="command",
        help="One of the commands listed below",
    )
    parser.add_argument(
        "arguments",
        nargs=argparse.REMAINDER,
        help="Command arguments",
    )
    return parser


def _bind_command(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Callable[[argparse.Namespace], int]:
    """Проверка числа аргументов команды и перенос их в namespace по именам."""
    if args.command is None:
        return cmd_help

    handler, positionals = {
        name: (func, dests) for name, func, _, dests in COMMANDS
    }[args.command]

    if len(args.arguments) != len(positionals):
        expected = " ".join(positionals) if positionals else "no arguments"
        parser.error(f"{args.command}: expected {expected}, got {len(args.arguments)} argument(s)")

    for dest, value in zip(positionals, args.arguments):
        setattr(args, dest, value)
    return handler


# =============================================================================
# ENTRY POINT
# =============================================================================


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the NELSC CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level not in LEVELS:
        parser.error(f"unknown log level {args.log_level!r}; choose from {', '.join(LEVELS)}")
    setup_logging(args.log_level, LOG_FORMAT)

    handler = _bind_command(parser, args)
    logger.debug("dispatching command %s", args.command or "help")

    try:
        return handler(args)
    except CalendarInputError as e:
        logger.debug("rejected input for %s: %r", args.command, e)
        print(e, file=sys.stderr)
        return 1
    except OutputWriteError as e:
        print(f"Output error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
