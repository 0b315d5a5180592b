"""Command line entry point.

``python -m hijri_calendar month 2025 3`` prints a month,
``python -m hijri_calendar countdown`` prints the next event and
``python -m hijri_calendar remind`` runs the reminder ticker until interrupted.
"""

import argparse
import asyncio
import traceback
from datetime import date, datetime

from hijri_calendar import __version__
from hijri_calendar.app_container import get_container, shutdown, startup
from hijri_calendar.use_cases.calendar_assembly import CalendarAssembly
from hijri_calendar.use_cases.countdown_scheduler import CountdownScheduler, countdown
from hijri_calendar.use_cases.interfaces import UserSettingsRepositoryInterface
from hijri_calendar.use_cases.reminders import DueRemindersUseCase
from hijri_calendar.utils.basic_logger import loguru_logger

logger = loguru_logger(__name__)

TICK_SECONDS = 30


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(prog="hijri_calendar", description="Dual Gregorian/Hijri calendar")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--stream_level", default=None, help="Console log level")
    commands = parser.add_subparsers(dest="command", required=True)

    month = commands.add_parser("month", help="Print a Gregorian month with Hijri dates and observances")
    month.add_argument("year", type=int)
    month.add_argument("month", type=int, choices=range(1, 13))
    month.add_argument("--country", default=None, help="ISO country code for national holidays")

    commands.add_parser("countdown", help="Print the countdown to the next Islamic event")
    commands.add_parser("remind", help="Poll for due reminders until interrupted")
    return parser.parse_args(argv)


async def print_month(year: int, month: int, country: str = None) -> None:
    container = get_container()
    settings = container[UserSettingsRepositoryInterface].load()
    view = await container[CalendarAssembly].build_month_view(
        year, month, country or settings.holiday_country, settings.filters
    )
    calendar = view.calendar
    print(f"{calendar.gregorian_month_name} {year} / {calendar.hijri_month_name} {calendar.hijri_year}")
    for item in view.days:
        marker = "*" if item.is_today else " "
        labels = [label for label in (item.observance.label, item.hijri_holiday) if label]
        labels += [event.text for event in item.notes.gregorian]
        labels += [event.name for event in item.notes.hijri]
        print(
            f"{marker} {item.day.gregorian.iso} {item.day.weekday.value:<9} "
            f"{item.day.hijri.key}  {'; '.join(labels)}"
        )


async def print_countdown() -> None:
    scheduler = get_container()[CountdownScheduler]
    now = datetime.now()
    current = await scheduler.oracle.gregorian_to_hijri(date.today())
    target = await scheduler.get_next_countdown_target(current)
    remaining = countdown(target, now)
    print(
        f"{target.event.value} ({target.hijri_date_string} H, {target.resolved_gregorian}): "
        f"{remaining.days}d {remaining.hours}h {remaining.minutes}m {remaining.seconds}s"
    )


async def run_reminders() -> None:
    due_reminders = get_container()[DueRemindersUseCase]
    logger.info(f"Checking reminders every {TICK_SECONDS} seconds")
    while True:
        for reminder in await due_reminders.check(datetime.now()):
            logger.success(f"[{reminder.kind.value}] {reminder.message}")
        await asyncio.sleep(TICK_SECONDS)


async def run(args) -> None:
    await startup()
    try:
        if args.command == "month":
            await print_month(args.year, args.month, args.country)
        elif args.command == "countdown":
            await print_countdown()
        else:
            await run_reminders()
    finally:
        await shutdown()


def main(argv=None):
    args = parse_arguments(argv)
    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.error(f"Command failed with error: {e}")
        traceback.print_exc()


if __name__ == "__main__":
    main()
