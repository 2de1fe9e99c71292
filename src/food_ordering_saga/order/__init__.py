"""Order aggregate, events and the order saga service."""

from __future__ import annotations

from .entities import Order, OrderItem, OrderStatus, Product, Restaurant
from .events import OrderCancelledEvent, OrderCreatedEvent, OrderEvent, OrderPaidEvent
from .service import OrderDomainService

__all__ = [
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
]
