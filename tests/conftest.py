# tests/conftest.py
"""Shared fixtures: a throwaway SQLite database holding the GECSEVENTS table."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from sqlalchemy import text
from gecs_events.database import create_tables, get_engine
from gecs_events.services.event_decoder import COLUMNS

TABLE = "GECSEVENTS"


def make_raw_row(eventnumber="1", began="2024-01-15 10:30:00.123456", **overrides):
    values = dict.fromkeys(c.name for c in COLUMNS)
    values.update(eventnumber=eventnumber, began=began, **overrides)
    return [values[c.name] for c in COLUMNS]


@pytest.fixture
def db_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'gecs.db'}"
    engine = get_engine(url)
    create_tables(engine)
    engine.dispose()
    return url


@pytest.fixture
def insert_rows(db_url):
    """Insert raw textual rows positionally, bypassing ORM type conversion."""
    def _insert(*rows):
        placeholders = ", ".join(f":v{i}" for i in range(18))
        stmt = text(f"INSERT INTO {TABLE} VALUES ({placeholders})")
        engine = get_engine(db_url)
        with engine.begin() as conn:
            for row in rows:
                conn.execute(stmt, {f"v{i}": v for i, v in enumerate(row)})
        engine.dispose()
    return _insert
