"""
Command-line availability lookup over the sample salon directory.

Usage:
    python main.py --date 2025-08-11 --service 1
    python main.py --date 2025-08-11 --combo 1 --employee 3 --granularity 30
"""

import argparse
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from salon_scheduler.logging_context import set_request_id
from salon_scheduler.schemas.booking_schema import AvailabilityQuery, AvailabilityStatus
from salon_scheduler.schemas.catalog_schema import ItemKind
from salon_scheduler.tools import directory
from salon_scheduler.tools.availability import check_availability
from salon_scheduler.tools.catalog import build_selectable_items, find_item

logger = logging.getLogger(__name__)

EXIT_CODES = {
    AvailabilityStatus.AVAILABLE: 0,
    AvailabilityStatus.UNAVAILABLE: 1,
    AvailabilityStatus.INVALID_REQUEST: 2,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List employees and free start times for salon services on a date."
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        required=True,
        help="Day to check, as YYYY-MM-DD.",
    )
    parser.add_argument(
        "--service",
        type=int,
        action="append",
        default=[],
        help="Service id to book (repeatable).",
    )
    parser.add_argument(
        "--combo",
        type=int,
        action="append",
        default=[],
        help="Combo id to book (repeatable).",
    )
    parser.add_argument(
        "--employee",
        type=int,
        default=None,
        help="Only show slots for this employee id.",
    )
    parser.add_argument(
        "--granularity",
        type=int,
        default=None,
        help="Minutes between candidate start times (default from config).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging output.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    set_request_id()
    items = build_selectable_items(directory.get_services(), directory.get_combos())
    try:
        selected = [find_item(items, ItemKind.COMBO, cid) for cid in args.combo]
        selected += [find_item(items, ItemKind.SERVICE, sid) for sid in args.service]
    except KeyError as exc:
        print(f"Error: {exc.args[0]}", file=sys.stderr)
        return EXIT_CODES[AvailabilityStatus.INVALID_REQUEST]

    query = AvailabilityQuery(
        date=args.date,
        selected_items=selected,
        candidate_employee_id=args.employee,
    )
    logger.debug("Checking %d item(s) on %s", len(selected), args.date)
    bookings = directory.get_sample_appointments()
    result = check_availability(
        query,
        directory.get_employees(),
        directory.get_company_schedule(),
        bookings,
        args.granularity,
    )

    print(result.message)
    for entry in result.employees:
        slots = ", ".join(entry.slots) if entry.slots else "fully booked"
        print(f"  {entry.employee_name} (#{entry.employee_id}): {slots}")

    return EXIT_CODES[result.status]


if __name__ == "__main__":
    sys.exit(main())
