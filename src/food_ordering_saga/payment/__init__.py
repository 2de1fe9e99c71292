"""Payment aggregate, credit ledger, events and the payment saga service."""

from __future__ import annotations

from .entities import (
    CreditEntry,
    CreditHistory,
    Payment,
    PaymentStatus,
    TransactionType,
)
from .events import (
    PaymentCancelledEvent,
    PaymentCompletedEvent,
    PaymentEvent,
    PaymentFailedEvent,
)
from .ledger import check_ledger_consistency, total_amount
from .service import PaymentDomainService

__all__ = [
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
    "total_amount",
]
