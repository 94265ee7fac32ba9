# gecs_events/services/event_decoder.py
"""
Decodes one raw GECSEVENTS row into a typed Event.

A raw row is the ordered sequence of 18 column values as text (or None for
SQL NULL). eventnumber and began are required and any problem with them is
fatal. Every other column degrades to None when missing or unparseable,
unless strict decoding is requested.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, NamedTuple, Optional, Sequence

from gecs_events.errors import RowDecodeError
from gecs_events.utils.logger import get_logger

logger = get_logger(__name__)

# began carries fractional seconds; the other timestamp columns never do
BEGAN_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
UINT8_MAX = 255

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
# Anything past microseconds (datetime2(7) and friends) is dropped
_LONG_FRACTION_RE = re.compile(r"(.*\.[0-9]{6})[0-9]+")


@dataclass
class Event:
    eventnumber: int                    # PK, int
    event_type: Optional[int]           # tinyint, column "type"
    server: Optional[str]
    batch: Optional[str]
    jobnum: Optional[str]
    submitted: Optional[datetime]
    began: datetime                     # PK, datetime with fractional seconds
    ended: Optional[datetime]
    message: Optional[str]
    status: Optional[int]
    priority: Optional[int]
    fixedby: Optional[str]
    fixcomment: Optional[str]
    color: Optional[int]
    bkcolor: Optional[int]
    beingworkedon: Optional[int]
    dateclosed: Optional[datetime]
    added: Optional[datetime]


# ── Value parsers ────────────────────────────────────────────────────────────
# Each raises ValueError on malformed text; the column policy decides whether
# that is fatal or degrades to None.

def parse_int32(raw: str) -> int:
    if not _SIGNED_RE.fullmatch(raw):
        raise ValueError("not an integer")
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError("out of 32-bit range")
    return value


def parse_uint8(raw: str) -> int:
    if not _UNSIGNED_RE.fullmatch(raw):
        raise ValueError("not an unsigned integer")
    value = int(raw)
    if value > UINT8_MAX:
        raise ValueError("out of 0..255 range")
    return value


def parse_began(raw: str) -> datetime:
    """Parse began; the fraction is optional and truncated to microseconds."""
    m = _LONG_FRACTION_RE.fullmatch(raw)
    if m:
        raw = m.group(1)
    try:
        return datetime.strptime(raw, BEGAN_FORMAT)
    except ValueError:
        return datetime.strptime(raw, TIMESTAMP_FORMAT)


def parse_timestamp(raw: str) -> datetime:
    return datetime.strptime(raw, TIMESTAMP_FORMAT)


def parse_string(raw: str) -> str:
    return raw


class Column(NamedTuple):
    name: str
    parse: Callable[[str], object]
    required: bool = False


# Declaration order == SELECT * column order
COLUMNS = (
    Column("eventnumber", parse_int32, required=True),
    Column("event_type", parse_uint8),
    Column("server", parse_string),
    Column("batch", parse_string),
    Column("jobnum", parse_string),
    Column("submitted", parse_timestamp),
    Column("began", parse_began, required=True),
    Column("ended", parse_timestamp),
    Column("message", parse_string),
    Column("status", parse_uint8),
    Column("priority", parse_uint8),
    Column("fixedby", parse_string),
    Column("fixcomment", parse_string),
    Column("color", parse_uint8),
    Column("bkcolor", parse_uint8),
    Column("beingworkedon", parse_uint8),
    Column("dateclosed", parse_timestamp),
    Column("added", parse_timestamp),
)


def _decode_column(column: Column, raw: Optional[str], strict: bool):
    if raw is None:
        if column.required:
            raise RowDecodeError(column.name, raw, "missing required value")
        return None
    try:
        return column.parse(raw)
    except ValueError as e:
        if column.required or strict:
            raise RowDecodeError(column.name, raw, str(e)) from e
        logger.debug(f"{column.name}: unparseable value {raw!r} treated as NULL ({e})")
        return None


def decode_event(raw: Sequence[Optional[str]], strict: bool = False) -> Event:
    """
    Build an Event from one raw row.
    Raises RowDecodeError if the row is short, a required column is missing
    or malformed, or (strict only) an optional column is malformed.
    """
    if len(raw) < len(COLUMNS):
        raise RowDecodeError(
            "row", None, f"expected {len(COLUMNS)} columns, got {len(raw)}"
        )

    values = {
        column.name: _decode_column(column, raw[index], strict)
        for index, column in enumerate(COLUMNS)
    }
    return Event(**values)
