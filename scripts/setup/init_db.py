# scripts/setup/init_db.py
"""
Initialize a scratch database — creates the GECSEVENTS table.
Point it at a test database, never at the production GECS server.
Usage: python scripts/setup/init_db.py --db sqlite:///gecs_scratch.db
"""

import sys
import os
import argparse
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text
from gecs_events.database import create_tables, get_engine
from gecs_events.config import settings


def main():
    parser = argparse.ArgumentParser(description="Create the GECSEVENTS table")
    parser.add_argument("--db", default=settings.DATABASE_URL)
    args = parser.parse_args()

    print("🗄️  GECS Events DB Initialization")
    print("=" * 40)
    engine = get_engine(args.db)
    print(f"📡 Database: {engine.url.render_as_string(hide_password=True)}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables(engine)

    tables = inspect(engine).get_table_names()
    print(f"\n📊 Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    print("\n🎉 Database ready! Seed it with:")
    print(f"   python scripts/test/simulate_event.py --db {args.db}")


if __name__ == "__main__":
    main()
