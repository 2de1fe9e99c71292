"""Payment domain events."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from ..domain.events import DomainEvent
from .entities import Payment


class PaymentEvent(DomainEvent):
    """Base for events carrying a :class:`Payment` snapshot."""

    aggregate_type: str | None = "Payment"
    payment: Payment
    failure_messages: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("payment", mode="after")
    @classmethod
    def _snapshot(cls, payment: Payment) -> Payment:
        return payment.model_copy(deep=True)

    @property
    def saga_id(self) -> UUID:
        """The order this payment belongs to; keys every message of the saga."""
        return self.payment.order_id


class PaymentCompletedEvent(PaymentEvent):
    pass


class PaymentCancelledEvent(PaymentEvent):
    pass


class PaymentFailedEvent(PaymentEvent):
    failure_messages: tuple[str, ...]

    @field_validator("failure_messages", mode="after")
    @classmethod
    def _require_messages(cls, messages: tuple[str, ...]) -> tuple[str, ...]:
        if not messages:
            raise ValueError("a failed payment must carry at least one message")
        return messages
