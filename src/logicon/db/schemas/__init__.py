from logicon.db.schemas.base import Base
from logicon.db.schemas.opportunity import OpportunityRow
from logicon.db.schemas.shipment import ShipmentRow
from logicon.db.schemas.truck import Truck

__all__ = ["Base", "OpportunityRow", "ShipmentRow", "Truck"]
