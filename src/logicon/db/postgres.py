"""PostgreSQL store — connection management and the three read queries."""

import logging
from datetime import datetime
from typing import Any, TypeVar

import psycopg
from pydantic import BaseModel, ValidationError

from logicon.config import Config
from logicon.db.credentials import resolve_db_credentials
from logicon.db.store import LogisticsStore
from logicon.errors import StoreUnavailableError
from logicon.models import Opportunity, ShipmentRecord, VehiclePosition

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_VEHICLE_POSITIONS_SQL = """
    SELECT id, license_plate, current_lat, current_lng, last_updated
    FROM trucks
    WHERE last_updated > %s
    ORDER BY id
"""

_OPEN_OPPORTUNITIES_SQL = """
    SELECT id, origin, destination, origin_lat, origin_lng, COALESCE(payload, ''), revenue, expiry
    FROM opportunities
    WHERE expiry > %s
    ORDER BY id
"""

_SHIPMENTS_SQL = """
    SELECT id, completed_at, revenue
    FROM shipments
    WHERE completed_at > %s
    ORDER BY id
"""


class PostgresStore(LogisticsStore):
    def __init__(self, config: Config) -> None:
        self._config = config
        self._conn: psycopg.Connection | None = None

    def connect(self) -> None:
        creds = resolve_db_credentials(self._config)
        try:
            self._conn = psycopg.connect(
                host=creds.host,
                port=creds.port,
                dbname=creds.dbname,
                user=creds.user,
                password=creds.password,
                connect_timeout=self._config.db_connect_timeout,
                autocommit=True,
            )
        except psycopg.Error as e:
            raise StoreUnavailableError(f"Could not connect to logistics database: {e}") from e

    def disconnect(self) -> None:
        if self._conn and not self._conn.closed:
            self._conn.close()
        self._conn = None

    def _require_connection(self) -> psycopg.Connection:
        """Return the active connection or raise if not connected."""
        if self._conn is None or self._conn.closed:
            raise StoreUnavailableError("PostgresStore is not connected. Call connect() first.")
        return self._conn

    def _fetch_all(self, sql: str, params: tuple[Any, ...]) -> list[tuple[Any, ...]]:
        conn = self._require_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchall()
        except psycopg.Error as e:
            logger.exception("Logistics query failed")
            raise StoreUnavailableError(f"Query failed: {e}") from e

    def _fetch_models(
        self, sql: str, params: tuple[Any, ...], model: type[ModelT], fields: tuple[str, ...]
    ) -> list[ModelT]:
        """Run ``sql`` and build one ``model`` per row, columns matched to ``fields`` by position."""
        rows = self._fetch_all(sql, params)
        try:
            return [model.model_validate(dict(zip(fields, row))) for row in rows]
        except ValidationError as e:
            logger.exception("Malformed %s row in logistics database", model.__name__)
            raise StoreUnavailableError(f"Malformed {model.__name__} row: {e}") from e

    def health_check(self) -> bool:
        try:
            conn = self._require_connection()
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
            return True
        except Exception:
            return False

    def fetch_vehicle_positions(self, updated_after: datetime) -> list[VehiclePosition]:
        return self._fetch_models(
            _VEHICLE_POSITIONS_SQL,
            (updated_after,),
            VehiclePosition,
            ("id", "license_plate", "latitude", "longitude", "last_updated"),
        )

    def fetch_open_opportunities(self, expires_after: datetime) -> list[Opportunity]:
        return self._fetch_models(
            _OPEN_OPPORTUNITIES_SQL,
            (expires_after,),
            Opportunity,
            (
                "id",
                "origin",
                "destination",
                "origin_latitude",
                "origin_longitude",
                "payload",
                "revenue",
                "expiry",
            ),
        )

    def fetch_shipments(self, completed_after: datetime) -> list[ShipmentRecord]:
        return self._fetch_models(
            _SHIPMENTS_SQL, (completed_after,), ShipmentRecord, ("id", "timestamp", "revenue")
        )

    def __enter__(self) -> "PostgresStore":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
