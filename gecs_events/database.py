# gecs_events/database.py
"""
Data-source connection and the single read-only query.
Uses SQLAlchemy over whatever driver the URL names (pyodbc DSN by default).
The table model shares Base so the setup script can create it in a scratch DB.
"""

from typing import Iterator, Optional, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from gecs_events.errors import QueryError, SourceConnectionError
from gecs_events.utils.logger import get_logger

logger = get_logger(__name__)

Base = declarative_base()

RawRow = Tuple[Optional[str], ...]


def get_engine(database_url: str, echo: bool = False) -> Engine:
    """One connection per run, so no pooling."""
    return create_engine(
        database_url,
        poolclass=NullPool,
        echo=echo,                   # Set True to log all SQL queries (debug only)
    )


def connect(descriptor: str) -> Connection:
    """
    Open a connection for the given SQLAlchemy URL.
    Raises SourceConnectionError for a bad URL, a missing driver, or an
    unreachable source.
    """
    try:
        engine = get_engine(descriptor)
        conn = engine.connect()
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise SourceConnectionError(f"Cannot connect to {descriptor}: {e}") from e
    logger.info(f"Connected to {engine.url.render_as_string(hide_password=True)}")
    return conn


def build_query(table: str) -> str:
    return f"SELECT * FROM {table};"


def raw_value(value) -> Optional[str]:
    """Normalise a driver value to the text the decoder expects."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def raw_row(row) -> RawRow:
    return tuple(raw_value(v) for v in row)


def _stream_rows(first, result) -> Iterator[RawRow]:
    yield raw_row(first)
    while True:
        try:
            row = result.fetchone()
        except SQLAlchemyError as e:
            raise QueryError(f"Fetching row failed: {e}") from e
        if row is None:
            return
        yield raw_row(row)


def execute(conn: Connection, query_text: str) -> Optional[Iterator[RawRow]]:
    """
    Run the query and return a lazy iterator of raw rows.
    Returns None when the statement produced no result set or no rows.
    Raises QueryError on execution or fetch failure.
    """
    logger.debug(f"Executing: {query_text}")
    try:
        result = conn.execution_options(stream_results=True).execute(text(query_text))
        if not result.returns_rows:
            return None
        first = result.fetchone()
    except SQLAlchemyError as e:
        raise QueryError(f"Query failed: {e}") from e

    if first is None:
        result.close()
        return None
    return _stream_rows(first, result)


def create_tables(engine: Engine):
    """
    Creates the GECSEVENTS table in a scratch database. Safe to call multiple times.
    The dump itself never writes; this is for the setup script and tests.
    """
    from gecs_events.models.gecs_event import GecsEvent   # noqa

    Base.metadata.create_all(bind=engine)
