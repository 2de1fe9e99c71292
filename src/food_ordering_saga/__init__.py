"""Choreographed order/payment saga over a credit ledger.

The ``order`` and ``payment`` packages are pure and synchronous: each saga
step takes aggregates, mutates them in place and returns one domain event.
Transport, persistence and logging live in ``messaging``, ``adapters``,
``application`` and ``observability``.
"""

from __future__ import annotations

# ── Domain ───────────────────────────────────────────────────────
from .domain import AggregateRoot, DomainEvent, Money, ValueObject

# ── Order ────────────────────────────────────────────────────────
from .order import (
    Order,
    OrderCancelledEvent,
    OrderCreatedEvent,
    OrderDomainService,
    OrderEvent,
    OrderItem,
    OrderPaidEvent,
    OrderStatus,
    Product,
    Restaurant,
)

# ── Payment ──────────────────────────────────────────────────────
from .payment import (
    CreditEntry,
    CreditHistory,
    Payment,
    PaymentCancelledEvent,
    PaymentCompletedEvent,
    PaymentDomainService,
    PaymentEvent,
    PaymentFailedEvent,
    PaymentStatus,
    TransactionType,
    check_ledger_consistency,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    DomainError,
    EntityNotFoundError,
    FixedClock,
    IClock,
    IIDGenerator,
    OptimisticLockingError,
    OrderDomainError,
    OrderingSagaError,
    ProductNotFoundError,
    RestaurantUnavailableError,
    UTCClock,
    UUID4Generator,
)

__all__: list[str] = [
    # Domain
    "AggregateRoot",
    "DomainEvent",
    "Money",
    "ValueObject",
    # Order
    "Order",
    "OrderCancelledEvent",
    "OrderCreatedEvent",
    "OrderDomainService",
    "OrderEvent",
    "OrderItem",
    "OrderPaidEvent",
    "OrderStatus",
    "Product",
    "Restaurant",
    # Payment
    "CreditEntry",
    "CreditHistory",
    "Payment",
    "PaymentCancelledEvent",
    "PaymentCompletedEvent",
    "PaymentDomainService",
    "PaymentEvent",
    "PaymentFailedEvent",
    "PaymentStatus",
    "TransactionType",
    "check_ledger_consistency",
    # Primitives
    "DomainError",
    "EntityNotFoundError",
    "FixedClock",
    "IClock",
    "IIDGenerator",
    "OptimisticLockingError",
    "OrderDomainError",
    "OrderingSagaError",
    "ProductNotFoundError",
    "RestaurantUnavailableError",
    "UTCClock",
    "UUID4Generator",
]
