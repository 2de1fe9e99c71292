from .repository import (
    InMemoryCreditLedgerRepository,
    InMemoryRepository,
    InMemoryRestaurantCatalog,
)

__all__ = [
    "InMemoryCreditLedgerRepository",
    "InMemoryRepository",
    "InMemoryRestaurantCatalog",
]
