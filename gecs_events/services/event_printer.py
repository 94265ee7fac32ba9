# gecs_events/services/event_printer.py
"""
Renders a decoded Event as labeled text lines, one block per event,
separated by a blank line. Missing values print as NULL.
"""

import sys
from typing import List, Optional, TextIO

from gecs_events.services.event_decoder import Event

NULL = "NULL"

# Print order; Event Type comes before Event Number
LABELS = (
    ("event_type", "Event Type"),
    ("eventnumber", "Event Number"),
    ("server", "Server"),
    ("batch", "Batch"),
    ("jobnum", "Job Number"),
    ("submitted", "Submitted"),
    ("began", "Began"),
    ("ended", "Ended"),
    ("message", "Message"),
    ("status", "Status"),
    ("priority", "Priority"),
    ("fixedby", "Fixed By"),
    ("fixcomment", "Fix Comment"),
    ("color", "Color"),
    ("bkcolor", "BkColor"),
    ("beingworkedon", "Being Worked On"),
    ("dateclosed", "Date Closed"),
    ("added", "Added"),
)


def render_value(value) -> str:
    return NULL if value is None else str(value)


def format_event(event: Event) -> List[str]:
    return [f"{label}: {render_value(getattr(event, field))}" for field, label in LABELS]


def print_event(event: Event, stream: Optional[TextIO] = None) -> None:
    """Write one event block plus the trailing blank line."""
    out = stream or sys.stdout
    out.write("\n".join(format_event(event)) + "\n\n")
