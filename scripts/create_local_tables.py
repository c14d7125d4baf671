#!/usr/bin/env python3
"""Create the logistics tables for local development.

This script creates the trucks, opportunities and shipments tables against the
local PostgreSQL instance configured through DB_* environment variables. It
uses the same ORM models Alembic reads, so the layout matches the migration.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from logicon.config import get_config
from logicon.db import Base
from logicon.db.credentials import resolve_db_credentials
from logicon.errors import StoreUnavailableError


def main():
    """Create all logistics tables that do not exist yet."""
    config = get_config()

    print(f"Creating logistics tables at {config.db_host}:{config.db_port}/{config.db_name}...")
    print()

    try:
        engine = create_engine(resolve_db_credentials(config).sqlalchemy_url)
    except StoreUnavailableError as e:
        print(f"✗ {e}")
        sys.exit(1)

    try:
        existing = set(inspect(engine).get_table_names())
        Base.metadata.create_all(engine)
    except OperationalError as e:
        print(f"✗ Could not reach PostgreSQL: {e}")
        sys.exit(1)
    finally:
        engine.dispose()

    for table_name in Base.metadata.tables:
        if table_name in existing:
            print(f"✓ {table_name} table already exists")
        else:
            print(f"✓ Created {table_name} table")

    print()
    print("✅ All logistics tables ready")


if __name__ == "__main__":
    main()
