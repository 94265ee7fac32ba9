# gecs_events/main.py
"""
Command-line entry point: connect, run the one query, decode and print
every row.
Usage: gecs-events
       gecs-events --db sqlite:///scratch.db --table GECSEVENTS
       gecs-events --strict --skip-bad-rows
"""

import argparse
import sys
from typing import Iterable, Optional, TextIO, Tuple

from gecs_events.config import settings
from gecs_events.database import RawRow, build_query, connect, execute
from gecs_events.errors import EventDumpError, RowDecodeError
from gecs_events.services.event_decoder import decode_event
from gecs_events.services.event_printer import print_event
from gecs_events.utils.logger import get_logger, set_level

logger = get_logger(__name__)

NO_DATA_MESSAGE = "Query executed, but no data returned."


def dump_rows(rows: Iterable[RawRow], out: TextIO, strict: bool = False,
              skip_bad_rows: bool = False) -> Tuple[int, int]:
    """
    Decode and print rows one at a time. Returns (printed, skipped).
    Without skip_bad_rows the first RowDecodeError propagates and ends the run.
    """
    printed = skipped = 0
    for index, raw in enumerate(rows, start=1):
        try:
            event = decode_event(raw, strict=strict)
        except RowDecodeError as e:
            if not skip_bad_rows:
                raise
            skipped += 1
            logger.warning(f"Row {index} skipped: {e}")
            continue
        print_event(event, out)
        printed += 1
    return printed, skipped


def run(database_url: str, table: str, strict: bool = False, skip_bad_rows: bool = False,
        out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Run the whole dump and return the process exit code."""
    out = out or sys.stdout
    err = err or sys.stderr

    try:
        with connect(database_url) as conn:
            rows = execute(conn, build_query(table))
            if rows is None:
                print(NO_DATA_MESSAGE, file=err)
                return 0
            printed, skipped = dump_rows(rows, out, strict=strict, skip_bad_rows=skip_bad_rows)
    except EventDumpError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    logger.info(f"Printed {printed} events")
    if skipped:
        print(f"Skipped {skipped} of {printed + skipped} rows with decode errors.", file=err)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gecs-events",
        description="Print every row of the GECS events table.",
    )
    parser.add_argument("--db", default=settings.DATABASE_URL,
                        help="SQLAlchemy database URL (default: %(default)s)")
    parser.add_argument("--table", default=settings.EVENTS_TABLE,
                        help="Qualified table name (default: %(default)s)")
    parser.add_argument("--strict", action="store_true", default=settings.STRICT_OPTIONAL_FIELDS,
                        help="Fail on malformed optional values instead of printing NULL")
    parser.add_argument("--skip-bad-rows", action="store_true", default=settings.SKIP_BAD_ROWS,
                        help="Skip rows that cannot be decoded and report them at the end")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_level(args.log_level)
    return run(args.db, args.table, strict=args.strict, skip_bad_rows=args.skip_bad_rows)


if __name__ == "__main__":
    sys.exit(main())
