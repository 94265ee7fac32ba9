# tests/test_event_decoder.py
"""Unit tests for the row decoder."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime
from gecs_events.errors import RowDecodeError
from gecs_events.services.event_decoder import COLUMNS, decode_event

FIELDS = [c.name for c in COLUMNS]


def make_row(**overrides):
    """Minimal valid raw row: only the required columns set."""
    values = dict.fromkeys(FIELDS)
    values["eventnumber"] = "42"
    values["began"] = "2024-01-15 10:30:00.123456"
    values.update(overrides)
    return [values[name] for name in FIELDS]


class TestRequiredFields:

    def test_valid_row_decodes(self):
        event = decode_event(make_row())
        assert event.eventnumber == 42
        assert event.began == datetime(2024, 1, 15, 10, 30, 0, 123456)

    def test_negative_and_signed_eventnumber(self):
        assert decode_event(make_row(eventnumber="-7")).eventnumber == -7
        assert decode_event(make_row(eventnumber="+7")).eventnumber == 7

    def test_missing_eventnumber_is_fatal(self):
        with pytest.raises(RowDecodeError) as exc:
            decode_event(make_row(eventnumber=None))
        assert exc.value.field == "eventnumber"

    @pytest.mark.parametrize("raw", ["", "abc", "4 2", " 42", "1_000", "2147483648"])
    def test_malformed_eventnumber_is_fatal(self, raw):
        with pytest.raises(RowDecodeError) as exc:
            decode_event(make_row(eventnumber=raw))
        assert exc.value.raw == raw

    def test_int32_bounds_accepted(self):
        assert decode_event(make_row(eventnumber="2147483647")).eventnumber == 2 ** 31 - 1
        assert decode_event(make_row(eventnumber="-2147483648")).eventnumber == -(2 ** 31)

    def test_missing_began_is_fatal(self):
        with pytest.raises(RowDecodeError) as exc:
            decode_event(make_row(began=None))
        assert exc.value.field == "began"

    def test_malformed_began_is_fatal(self):
        with pytest.raises(RowDecodeError):
            decode_event(make_row(began="15/01/2024 10:30"))

    @pytest.mark.parametrize("raw", [
        "2024-01-15 10:30:00.1234567\n",
        "2024-01-15 10:30:00.123456\n",
        "2024-01-15 10:30:00.1234567x",
    ])
    def test_trailing_input_on_began_is_fatal(self, raw):
        with pytest.raises(RowDecodeError) as exc:
            decode_event(make_row(began=raw))
        assert exc.value.field == "began"

    def test_began_without_fraction(self):
        event = decode_event(make_row(began="2024-01-15 10:30:00"))
        assert event.began == datetime(2024, 1, 15, 10, 30)

    def test_began_short_fraction(self):
        event = decode_event(make_row(began="2024-01-15 10:30:00.123"))
        assert event.began.microsecond == 123000

    def test_began_seven_digit_fraction_truncated(self):
        event = decode_event(make_row(began="2024-01-15 10:30:00.1234567"))
        assert event.began.microsecond == 123456

    def test_short_row_is_fatal(self):
        with pytest.raises(RowDecodeError) as exc:
            decode_event(make_row()[:17])
        assert exc.value.field == "row"


class TestOptionalFields:

    def test_all_optional_absent(self):
        event = decode_event(make_row())
        for name in FIELDS:
            if name not in ("eventnumber", "began"):
                assert getattr(event, name) is None, name

    def test_small_ints_parse(self):
        event = decode_event(make_row(event_type="3", status="0", priority="255",
                                      color="12", bkcolor="+4", beingworkedon="1"))
        assert (event.event_type, event.status, event.priority) == (3, 0, 255)
        assert (event.color, event.bkcolor, event.beingworkedon) == (12, 4, 1)

    @pytest.mark.parametrize("raw", ["300", "256", "-1", "-0", "x", "", "1.0", " 3"])
    def test_bad_small_int_degrades_to_none(self, raw):
        assert decode_event(make_row(event_type=raw)).event_type is None

    def test_strings_pass_through(self):
        event = decode_event(make_row(server="SRV1", batch="", message="  padded  "))
        assert event.server == "SRV1"
        assert event.batch == ""
        assert event.message == "  padded  "

    def test_timestamps_parse(self):
        event = decode_event(make_row(submitted="2024-01-15 09:00:00",
                                      dateclosed="2024-02-01 00:00:01"))
        assert event.submitted == datetime(2024, 1, 15, 9, 0, 0)
        assert event.dateclosed == datetime(2024, 2, 1, 0, 0, 1)

    def test_fractional_optional_timestamp_degrades(self):
        # Only began uses the fractional format
        event = decode_event(make_row(ended="2024-01-15 10:30:00.123456"))
        assert event.ended is None

    @pytest.mark.parametrize("raw", ["2024-01-15", "2024-01-15T10:30:00", "yesterday", ""])
    def test_bad_timestamp_degrades_to_none(self, raw):
        assert decode_event(make_row(added=raw)).added is None


class TestStrictMode:

    def test_malformed_optional_raises(self):
        with pytest.raises(RowDecodeError) as exc:
            decode_event(make_row(status="300"), strict=True)
        assert exc.value.field == "status"
        assert exc.value.raw == "300"

    def test_fractional_optional_timestamp_raises(self):
        with pytest.raises(RowDecodeError):
            decode_event(make_row(submitted="2024-01-15 10:30:00.5"), strict=True)

    def test_absent_optional_still_fine(self):
        event = decode_event(make_row(), strict=True)
        assert event.status is None


class TestDeterminism:

    def test_same_row_decodes_equal(self):
        row = make_row(event_type="3", server="S", submitted="2024-01-15 09:00:00")
        assert decode_event(row) == decode_event(row)
