"""Saga orchestration: load, decide, persist, dispatch."""

from __future__ import annotations

from .bootstrap import build_order_dispatcher, build_payment_dispatcher
from .dto import PaymentOrderStatus, PaymentRequest, PaymentResponse
from .order_saga import OrderSagaHandler
from .payment_saga import PaymentSagaHandler

__all__ = [
    "OrderSagaHandler",
    "PaymentOrderStatus",
    "PaymentRequest",
    "PaymentResponse",
    "PaymentSagaHandler",
    "build_order_dispatcher",
    "build_payment_dispatcher",
]
