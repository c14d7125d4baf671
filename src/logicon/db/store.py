from abc import ABC, abstractmethod
from datetime import datetime

from logicon.models import Opportunity, ShipmentRecord, VehiclePosition


class LogisticsStore(ABC):
    """Read-only access to the vehicle, opportunity and shipment tables.

    Implementations raise ``StoreUnavailableError`` when the underlying data
    source cannot be queried. Rows are returned in ``id`` order.
    """

    @abstractmethod
    def fetch_vehicle_positions(self, updated_after: datetime) -> list[VehiclePosition]: ...

    @abstractmethod
    def fetch_open_opportunities(self, expires_after: datetime) -> list[Opportunity]: ...

    @abstractmethod
    def fetch_shipments(self, completed_after: datetime) -> list[ShipmentRecord]: ...

    @abstractmethod
    def health_check(self) -> bool: ...
