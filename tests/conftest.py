"""Shared test fixtures for Logicon."""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Never pick up a real Secrets Manager ARN during tests
os.environ.pop("DB_SECRET_ARN", None)

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from logicon.db.store import LogisticsStore  # noqa: E402
from logicon.errors import StoreUnavailableError  # noqa: E402

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


class FakeStore(LogisticsStore):
    """In-memory store that ignores pushed-down predicates and returns every row.

    Services must still honour their filters, so tests see exactly what the
    service logic selects.
    """

    def __init__(self, positions=None, opportunities=None, shipments=None, fail=False):
        self.positions = list(positions or [])
        self.opportunities = list(opportunities or [])
        self.shipments = list(shipments or [])
        self.fail = fail
        self.calls: list[tuple[str, datetime]] = []

    def _check(self, name: str, arg: datetime) -> None:
        self.calls.append((name, arg))
        if self.fail:
            raise StoreUnavailableError("connection refused")

    def fetch_vehicle_positions(self, updated_after):
        self._check("fetch_vehicle_positions", updated_after)
        return list(self.positions)

    def fetch_open_opportunities(self, expires_after):
        self._check("fetch_open_opportunities", expires_after)
        return list(self.opportunities)

    def fetch_shipments(self, completed_after):
        self._check("fetch_shipments", completed_after)
        return list(self.shipments)

    def health_check(self) -> bool:
        return not self.fail


@pytest.fixture
def now():
    return NOW


# PostgreSQL fixtures
@pytest.fixture
def pg_connection():
    """Provide a PostgreSQL connection for integration tests."""
    import psycopg
    from logicon.config import get_config

    config = get_config()
    conn_str = (
        f"host={config.db_host} port={config.db_port} "
        f"dbname={config.db_name} user={config.db_user} "
        f"password={config.db_password}"
    )

    conn = psycopg.connect(conn_str)
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()


@pytest.fixture
def clean_tables(pg_connection):
    """Empty the logistics tables before and after a test."""
    def _truncate():
        with pg_connection.cursor() as cur:
            cur.execute("TRUNCATE trucks, opportunities, shipments RESTART IDENTITY")
        pg_connection.commit()

    _truncate()
    yield pg_connection
    pg_connection.rollback()
    _truncate()


@pytest.fixture
def make_store():
    return FakeStore
