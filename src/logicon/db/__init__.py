"""
Database ORM models and clients for Logicon.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from logicon.db.postgres import PostgresStore
from logicon.db.schemas import Base, OpportunityRow, ShipmentRow, Truck
from logicon.db.store import LogisticsStore

__all__ = ["Base", "LogisticsStore", "OpportunityRow", "PostgresStore", "ShipmentRow", "Truck"]
