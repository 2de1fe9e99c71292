from .repository import ICreditLedgerRepository, IRepository, IRestaurantCatalog
from .transport import DeliveryCallback, DeliveryResult, IEventTransport

__all__ = [
    "DeliveryCallback",
    "DeliveryResult",
    "ICreditLedgerRepository",
    "IEventTransport",
    "IRepository",
    "IRestaurantCatalog",
]
