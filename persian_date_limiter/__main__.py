import argparse
import sys
from datetime import date
from typing import List, Optional

from persian_date_limiter import __version__
from persian_date_limiter import loguru_logger
from persian_date_limiter.adapters.default_date_range_limiter import DefaultDateRangeLimiter
from persian_date_limiter.adapters.repositories.file_storage import FileLimiterStateRepository
from persian_date_limiter.entities.calendar_date import CalendarDate
from persian_date_limiter.settings.limiter_settings import LimiterSettings
from persian_date_limiter.utils.exceptions import PersianDateLimiterError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="persian_date_limiter",
        description="Persian calendar conversion and date range checks",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--min_year", type=int, help="First selectable Persian year")
    parser.add_argument("--max_year", type=int, help="Last selectable Persian year")
    parser.add_argument("--time_zone", help="IANA time zone, system zone when omitted")
    parser.add_argument("--state_file_path", help="Where --save and --load keep the limiter state")
    parser.add_argument("--stream_level", default="WARNING", help="Console log level")

    commands = parser.add_subparsers(dest="command", required=True)

    to_persian = commands.add_parser("to-persian", help="Convert a Gregorian YYYY-MM-DD date")
    to_persian.add_argument("date")

    to_gregorian = commands.add_parser("to-gregorian", help="Convert a Persian YYYY/MM/DD date")
    to_gregorian.add_argument("date")

    for name, description in (
        ("check", "Tell whether a Persian date may be picked"),
        ("nearest", "Print the closest Persian date that may be picked"),
    ):
        command = commands.add_parser(name, help=description)
        command.add_argument("date", help="Persian YYYY/MM/DD date")
        command.add_argument("--min_date", help="Persian YYYY/MM/DD")
        command.add_argument("--max_date", help="Persian YYYY/MM/DD")
        command.add_argument("--selectable", nargs="*", default=[], help="Persian YYYY/MM/DD dates")
        command.add_argument("--disabled", nargs="*", default=[], help="Persian YYYY/MM/DD dates")
        command.add_argument("--save", action="store_true", help="Persist the configured limiter")
        command.add_argument("--load", action="store_true", help="Start from the persisted limiter")

    return parser


def build_settings(args: argparse.Namespace) -> LimiterSettings:
    overrides = {
        field_name: getattr(args, field_name)
        for field_name in ("min_year", "max_year", "time_zone", "state_file_path")
        if getattr(args, field_name) is not None
    }
    return LimiterSettings(**overrides)


def build_limiter(
    args: argparse.Namespace,
    settings: LimiterSettings,
    repository: FileLimiterStateRepository,
) -> DefaultDateRangeLimiter:
    state = repository.load() if args.load else None
    if state is not None:
        limiter = DefaultDateRangeLimiter.from_state(state)
    else:
        limiter = DefaultDateRangeLimiter.from_settings(settings)

    zone = settings.time_zone
    if args.min_date:
        limiter.set_min_date(CalendarDate.parse(args.min_date, time_zone=zone))
    if args.max_date:
        limiter.set_max_date(CalendarDate.parse(args.max_date, time_zone=zone))
    if args.selectable:
        limiter.set_selectable_days(CalendarDate.parse(day, time_zone=zone) for day in args.selectable)
    if args.disabled:
        limiter.set_disabled_days(CalendarDate.parse(day, time_zone=zone) for day in args.disabled)

    if args.save:
        repository.save(limiter.to_state())
    return limiter


def run(args: argparse.Namespace) -> str:
    settings = build_settings(args)
    zone = settings.time_zone

    if args.command == "to-persian":
        gregorian = date.fromisoformat(args.date)
        persian = CalendarDate.from_gregorian(gregorian.year, gregorian.month, gregorian.day, zone)
        return f"{persian.short_date()}\t{persian.long_date()}"

    if args.command == "to-gregorian":
        return CalendarDate.parse(args.date, time_zone=zone).to_gregorian().isoformat()

    repository = FileLimiterStateRepository(settings.state_file_path)
    limiter = build_limiter(args, settings, repository)
    requested = CalendarDate.parse(args.date, time_zone=zone)

    if args.command == "check":
        out_of_range = limiter.is_out_of_range(
            requested.persian_year,
            requested.persian_month,
            requested.persian_day,
        )
        return "out of range" if out_of_range else "in range"

    return limiter.set_to_nearest_date(requested).short_date()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = loguru_logger(__name__, stream_level=args.stream_level)
    try:
        print(run(args))
    except PersianDateLimiterError as e:
        logger.error(f"{e.to_json()}")
        return 2
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
