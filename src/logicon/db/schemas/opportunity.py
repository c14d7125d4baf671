"""SQLAlchemy ORM model for the opportunities table."""

from sqlalchemy import CheckConstraint, Float, Index, Integer, Numeric, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from logicon.db.schemas.base import Base


class OpportunityRow(Base):
    __tablename__ = "opportunities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    origin: Mapped[str] = mapped_column(Text, nullable=False)
    destination: Mapped[str] = mapped_column(Text, nullable=False)
    origin_lat: Mapped[float] = mapped_column(Float, nullable=False)
    origin_lng: Mapped[float] = mapped_column(Float, nullable=False)
    payload: Mapped[str | None] = mapped_column(Text)
    revenue = mapped_column(Numeric(12, 2), nullable=False)
    expiry = mapped_column(TIMESTAMP(timezone=True), nullable=False)

    __table_args__ = (
        CheckConstraint("revenue >= 0", name="chk_opportunities_revenue"),
        Index("idx_opportunities_expiry", "expiry"),
    )
