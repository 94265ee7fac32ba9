# gecs_events/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
Defaults point at the GECS_Testing ODBC DSN and its events table.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Data source ───────────────────────────────────────────────────────
    # 64-bit ODBC DSN; pyodbc must be installed for the mssql dialect
    DATABASE_URL: str = "mssql+pyodbc://@GECS_Testing"
    EVENTS_TABLE: str = "[GECS_Testing].[dbo].[GECSEVENTS]"

    # ── Decoding policy ───────────────────────────────────────────────────
    STRICT_OPTIONAL_FIELDS: bool = False   # Raise on malformed optional values
    SKIP_BAD_ROWS: bool = False            # Skip undecodable rows instead of aborting

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None         # Set to enable the rotating file log

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
