"""SQLAlchemy ORM model for the shipments table."""

from sqlalchemy import CheckConstraint, Index, Integer, Numeric
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from logicon.db.schemas.base import Base


class ShipmentRow(Base):
    __tablename__ = "shipments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    completed_at = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    revenue = mapped_column(Numeric(12, 2), nullable=False)

    __table_args__ = (
        CheckConstraint("revenue >= 0", name="chk_shipments_revenue"),
        Index("idx_shipments_completed_at", "completed_at"),
    )
