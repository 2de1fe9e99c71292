"""Messages exchanged between the order and payment saga handlers."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, cast
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..domain.value_object import Money
from ..payment.entities import PaymentStatus

if TYPE_CHECKING:
    from ..messaging.envelope import MessageEnvelope


class PaymentOrderStatus(str, Enum):
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"


_REQUEST_STATUS_BY_EVENT = {
    "OrderCreatedEvent": PaymentOrderStatus.PENDING,
    "OrderCancelledEvent": PaymentOrderStatus.CANCELLED,
}

_RESPONSE_STATUS_BY_EVENT = {
    "PaymentCompletedEvent": PaymentStatus.COMPLETED,
    "PaymentCancelledEvent": PaymentStatus.CANCELLED,
    "PaymentFailedEvent": PaymentStatus.FAILED,
}


def _section(envelope: MessageEnvelope, key: str) -> dict[str, Any]:
    return cast("dict[str, Any]", envelope.payload[key])


def _failure_messages(envelope: MessageEnvelope) -> tuple[str, ...]:
    messages = cast("list[str]", envelope.payload.get("failure_messages", []))
    return tuple(messages)


class PaymentRequest(BaseModel):
    """Asks the payment side to debit (PENDING) or refund (CANCELLED) an order."""

    model_config = ConfigDict(frozen=True)

    order_id: UUID
    customer_id: UUID
    price: Money
    order_status: PaymentOrderStatus
    failure_messages: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def from_envelope(cls, envelope: MessageEnvelope) -> PaymentRequest:
        """Build a request from an order event envelope.

        Raises:
            ValueError: if the envelope does not carry an order event.
        """
        status = _REQUEST_STATUS_BY_EVENT.get(envelope.event_type)
        if status is None:
            raise ValueError(f"{envelope.event_type} is not a payment request")
        order = _section(envelope, "order")
        return cls(
            order_id=order["id"],
            customer_id=order["customer_id"],
            price=order["price"],
            order_status=status,
            failure_messages=_failure_messages(envelope),
        )


class PaymentResponse(BaseModel):
    """Tells the order side how the payment step ended."""

    model_config = ConfigDict(frozen=True)

    order_id: UUID
    payment_id: UUID
    customer_id: UUID
    price: Money
    payment_status: PaymentStatus
    failure_messages: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def from_envelope(cls, envelope: MessageEnvelope) -> PaymentResponse:
        """Build a response from a payment event envelope.

        Raises:
            ValueError: if the envelope does not carry a payment event.
        """
        status = _RESPONSE_STATUS_BY_EVENT.get(envelope.event_type)
        if status is None:
            raise ValueError(f"{envelope.event_type} is not a payment response")
        payment = _section(envelope, "payment")
        return cls(
            order_id=payment["order_id"],
            payment_id=payment["id"],
            customer_id=payment["customer_id"],
            price=payment["price"],
            payment_status=status,
            failure_messages=_failure_messages(envelope),
        )
