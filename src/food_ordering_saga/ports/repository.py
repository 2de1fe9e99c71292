"""Repository protocols used by the saga handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable
from uuid import UUID

from ..domain.aggregate import AggregateRoot

if TYPE_CHECKING:
    from ..order.entities import Restaurant
    from ..payment.entities import CreditEntry, CreditHistory

T = TypeVar("T", bound=AggregateRoot[Any])


@runtime_checkable
class IRepository(Protocol[T]):
    """
    Generic repository for state-stored aggregates.

    ``add`` is an upsert guarded by optimistic locking: saving an aggregate
    whose version is older than the stored one must raise
    ``OptimisticLockingError``.
    """

    async def add(self, entity: T) -> UUID: ...

    async def get(self, entity_id: UUID) -> T | None: ...

    async def list_all(self) -> list[T]: ...


@runtime_checkable
class ICreditLedgerRepository(Protocol):
    """Per-customer credit balance plus its append-only history.

    ``save`` is guarded by the credit entry's version: a ledger loaded before
    a concurrent save must be rejected with ``OptimisticLockingError`` and
    nothing of it may be stored.
    """

    async def get_ledger(
        self, customer_id: UUID
    ) -> tuple[CreditEntry, list[CreditHistory]] | None:
        """Return the entry and the history it was computed from, read together."""
        ...

    async def get_credit_entry(self, customer_id: UUID) -> CreditEntry | None: ...

    async def get_credit_history(self, customer_id: UUID) -> list[CreditHistory]: ...

    async def save(
        self, credit_entry: CreditEntry, credit_histories: list[CreditHistory]
    ) -> None:
        """Persist the balance and append history entries not stored yet."""
        ...


@runtime_checkable
class IRestaurantCatalog(Protocol):
    """Read-only source of restaurant snapshots."""

    async def get_restaurant(self, restaurant_id: UUID) -> Restaurant | None: ...
