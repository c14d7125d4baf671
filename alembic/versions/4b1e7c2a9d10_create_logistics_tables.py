"""create_logistics_tables

Revision ID: 4b1e7c2a9d10
Revises: 
Create Date: 2026-10-17 09:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e7c2a9d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Live vehicle positions, one row per truck
    op.execute("""
        CREATE TABLE IF NOT EXISTS trucks (
            id SERIAL PRIMARY KEY,
            license_plate VARCHAR(32) NOT NULL UNIQUE,
            current_lat DOUBLE PRECISION NOT NULL,
            current_lng DOUBLE PRECISION NOT NULL,
            last_updated TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_trucks_last_updated
        ON trucks (last_updated)
    """)

    # Freight opportunities offered for pickup
    op.execute("""
        CREATE TABLE IF NOT EXISTS opportunities (
            id SERIAL PRIMARY KEY,
            origin TEXT NOT NULL,
            destination TEXT NOT NULL,
            origin_lat DOUBLE PRECISION NOT NULL,
            origin_lng DOUBLE PRECISION NOT NULL,
            payload TEXT,
            revenue NUMERIC(12, 2) NOT NULL,
            expiry TIMESTAMPTZ NOT NULL,
            CONSTRAINT chk_opportunities_revenue CHECK (revenue >= 0)
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_opportunities_expiry
        ON opportunities (expiry)
    """)

    # Completed shipments, append-only
    op.execute("""
        CREATE TABLE IF NOT EXISTS shipments (
            id SERIAL PRIMARY KEY,
            completed_at TIMESTAMPTZ NOT NULL,
            revenue NUMERIC(12, 2) NOT NULL,
            CONSTRAINT chk_shipments_revenue CHECK (revenue >= 0)
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_shipments_completed_at
        ON shipments (completed_at)
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP INDEX IF EXISTS idx_shipments_completed_at")
    op.execute("DROP TABLE IF EXISTS shipments")
    op.execute("DROP INDEX IF EXISTS idx_opportunities_expiry")
    op.execute("DROP TABLE IF EXISTS opportunities")
    op.execute("DROP INDEX IF EXISTS idx_trucks_last_updated")
    op.execute("DROP TABLE IF EXISTS trucks")
