"""Command line entry point printing the calendar status of a day or a year's holidays.

Examples::

    python -m src.working_days.calendar_cli
    python -m src.working_days.calendar_cli --date 2020-04-13
    python -m src.working_days.calendar_cli --year 2024
    python -m src.working_days.calendar_cli --caldav-url https://dav.example.org \
        --caldav-path /calendars/team/holidays/
"""

import json
import sys
from argparse import ArgumentParser, Namespace
from datetime import date, datetime
from typing import Any, List, Optional

from src.utils.config.parameters import ParameterLoader
from src.utils.io.logger import Logger
from src.working_days.errors import ConfigurationError, ConnectivityError
from src.working_days.oracle.oracle_factory import build_oracle


def create_arg_parser() -> ArgumentParser:
    """
    Create the argument parser for the program
    :return: The argument parser
    """
    parser = ArgumentParser(
        prog="calendar_cli",
        description="Tell whether a day is a French public holiday and a working day",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--date", help="day to check, default today")
    target.add_argument("--year", type=int, help="list the holidays of a year")
    parser.add_argument("--timezone", help="civil time zone, default Europe/Paris")
    parser.add_argument(
        "--caldav-url", help="caldav url to use to read holidays events"
    )
    parser.add_argument(
        "--caldav-path", help="caldav path to use to read holidays events"
    )
    parser.add_argument(
        "--caldav-summary-pattern",
        help="summary pattern that matches holidays events (default 'Holidays')",
    )
    return parser


def _apply_overrides(params: ParameterLoader, args: Namespace) -> None:
    flags = {
        "calendar_tz": args.timezone,
        "caldav_url": args.caldav_url,
        "caldav_path": args.caldav_path,
        "caldav_summary_pattern": args.caldav_summary_pattern,
    }
    for key, value in flags.items():
        if value is not None:
            params.set(key, value)


def _parse_date(value: str, date_format: str) -> date:
    try:
        return datetime.strptime(value.strip(), date_format).date()
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid date '{value}', expected format {date_format}"
        ) from exc


def main(argv: Optional[List[str]] = None, params: Optional[ParameterLoader] = None) -> int:
    """Run the command line and return the process exit code."""
    args = create_arg_parser().parse_args(argv)
    params = params or ParameterLoader()
    _apply_overrides(params, args)
    Logger.configure()
    try:
        oracle = build_oracle(params)
        output: Any
        if args.year is not None:
            names = oracle.holiday_set.holiday_names_for(args.year)
            output = {day.date().isoformat(): name for day, name in names.items()}
        elif args.date is not None:
            day = _parse_date(args.date, params.get("date_format", "%Y-%m-%d"))
            output = oracle.calendar_day(day).to_json()
        else:
            output = oracle.calendar_day().to_json()
    except (ConfigurationError, ConnectivityError, ValueError) as exc:
        Logger.error(str(exc))
        return 1
    print(json.dumps(output, indent=4, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
