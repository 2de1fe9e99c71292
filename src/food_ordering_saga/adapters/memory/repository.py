"""Dict-backed repositories for tests and local runs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ...domain.aggregate import AggregateRoot
from ...payment.entities import CreditEntry
from ...ports.repository import (
    ICreditLedgerRepository,
    IRepository,
    IRestaurantCatalog,
)
from ...primitives.exceptions import OptimisticLockingError

if TYPE_CHECKING:
    import builtins
    from collections.abc import Iterable
    from uuid import UUID

    from ...order.entities import Restaurant
    from ...payment.entities import CreditHistory

T = TypeVar("T", bound=AggregateRoot[Any])


class InMemoryRepository(IRepository[T]):
    """In-memory implementation of ``IRepository[T]``.

    Stores deep copies keyed by ``id`` so callers never share a live
    instance with the store, and checks versions on every ``add``.
    """

    def __init__(self) -> None:
        self._store: dict[UUID, T] = {}

    async def add(self, entity: T) -> UUID:
        stored = self._store.get(entity.id)
        if stored is not None and stored.version != entity.version:
            raise OptimisticLockingError(
                type(entity).__name__, entity.id, entity.version, stored.version
            )
        entity.increment_version()
        self._store[entity.id] = entity.model_copy(deep=True)
        return entity.id

    async def get(self, entity_id: UUID) -> T | None:
        return self.snapshot(entity_id)

    def snapshot(self, entity_id: UUID) -> T | None:
        """Synchronous ``get`` for adapters composing several reads."""
        stored = self._store.get(entity_id)
        return stored.model_copy(deep=True) if stored is not None else None

    async def list_all(self) -> builtins.list[T]:
        return [entity.model_copy(deep=True) for entity in self._store.values()]

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._store.clear()


class InMemoryCreditLedgerRepository(ICreditLedgerRepository):
    """Credit entries keyed by customer, each with an append-only history."""

    def __init__(self) -> None:
        self._entries = InMemoryRepository[CreditEntry]()
        self._entry_ids: dict[UUID, UUID] = {}
        self._histories: dict[UUID, list[CreditHistory]] = {}

    async def get_ledger(
        self, customer_id: UUID
    ) -> tuple[CreditEntry, list[CreditHistory]] | None:
        entry_id = self._entry_ids.get(customer_id)
        if entry_id is None:
            return None
        # No await between the two reads: entry and history share one version.
        stored = self._entries.snapshot(entry_id)
        if stored is None:
            return None
        return stored, list(self._histories.get(customer_id, []))

    async def get_credit_entry(self, customer_id: UUID) -> CreditEntry | None:
        entry_id = self._entry_ids.get(customer_id)
        if entry_id is None:
            return None
        return await self._entries.get(entry_id)

    async def get_credit_history(self, customer_id: UUID) -> list[CreditHistory]:
        return list(self._histories.get(customer_id, []))

    async def save(
        self, credit_entry: CreditEntry, credit_histories: list[CreditHistory]
    ) -> None:
        await self._entries.add(credit_entry)
        self._entry_ids[credit_entry.customer_id] = credit_entry.id
        stored = self._histories.setdefault(credit_entry.customer_id, [])
        known = {history.id for history in stored}
        stored.extend(h for h in credit_histories if h.id not in known)


class InMemoryRestaurantCatalog(IRestaurantCatalog):
    """Restaurant snapshots held in a dict."""

    def __init__(self, restaurants: Iterable[Restaurant] = ()) -> None:
        self._restaurants = {r.id: r for r in restaurants}

    def put(self, restaurant: Restaurant) -> None:
        self._restaurants[restaurant.id] = restaurant

    async def get_restaurant(self, restaurant_id: UUID) -> Restaurant | None:
        return self._restaurants.get(restaurant_id)
