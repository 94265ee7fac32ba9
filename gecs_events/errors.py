# gecs_events/errors.py
"""
Fatal error types. Anything raised from here aborts the run unless skip mode
is on, in which case only RowDecodeError is recovered per row.
"""

from typing import Optional


class EventDumpError(Exception):
    """Base class for every error that ends the dump with a non-zero exit."""


class SourceConnectionError(EventDumpError):
    """Bad connection descriptor, missing driver, or unreachable source."""


class QueryError(EventDumpError):
    """The query failed to execute, or fetching a row from it failed."""


class RowDecodeError(EventDumpError):
    """A row could not be turned into an Event."""

    def __init__(self, field: str, raw: Optional[str], reason: str):
        self.field = field
        self.raw = raw
        self.reason = reason
        super().__init__(f"{field}: {reason} (raw={raw!r})")
