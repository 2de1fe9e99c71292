"""Order domain events."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from ..domain.events import DomainEvent
from .entities import Order


class OrderEvent(DomainEvent):
    """Base for events carrying an :class:`Order` snapshot."""

    aggregate_type: str | None = "Order"
    order: Order

    @field_validator("order", mode="after")
    @classmethod
    def _snapshot(cls, order: Order) -> Order:
        return order.model_copy(deep=True)

    @property
    def saga_id(self) -> UUID:
        return self.order.id


class OrderCreatedEvent(OrderEvent):
    pass


class OrderPaidEvent(OrderEvent):
    pass


class OrderCancelledEvent(OrderEvent):
    """Triggers the compensating payment cancellation."""

    failure_messages: tuple[str, ...] = Field(default_factory=tuple)
