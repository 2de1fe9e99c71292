"""Logs what each saga step decided."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .order.events import OrderCancelledEvent, OrderCreatedEvent, OrderPaidEvent
from .payment.events import (
    PaymentCancelledEvent,
    PaymentCompletedEvent,
    PaymentFailedEvent,
)

if TYPE_CHECKING:
    from .domain.events import DomainEvent

logger = logging.getLogger("food_ordering_saga.saga")

_MESSAGES: dict[type[DomainEvent], str] = {
    OrderCreatedEvent: "Order with id [%s] is initiated",
    OrderPaidEvent: "Order with id [%s] is paid",
    OrderCancelledEvent: "Order payment is cancelling for order with id [%s]",
    PaymentCompletedEvent: "Payment is initiated for order id [%s]",
    PaymentCancelledEvent: "Payment is cancelled for order id [%s]",
    PaymentFailedEvent: "Payment is failed for order id [%s]",
}


class SagaOutcomeLogger:
    """Event handler the orchestrator registers next to its publishers.

    Register it for every event type returned by the saga services::

        for event_type in SagaOutcomeLogger.EVENT_TYPES:
            dispatcher.register(event_type, outcome_logger)
    """

    EVENT_TYPES: tuple[type[DomainEvent], ...] = tuple(_MESSAGES)

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def handle(self, event: DomainEvent) -> None:
        template = _MESSAGES.get(type(event))
        saga_id = getattr(event, "saga_id", event.aggregate_id)
        if template is None:
            self._log.debug("%s for [%s]", type(event).__name__, saga_id)
            return

        failed = isinstance(event, PaymentFailedEvent)
        level = logging.WARNING if failed else logging.INFO
        self._log.log(level, template, saga_id)
        for message in getattr(event, "failure_messages", ()):
            self._log.error("[%s] %s", saga_id, message)

    def log_order_approved(self, order_id: object) -> None:
        """Approval produces no event; the handler reports it explicitly."""
        self._log.info("Order with id [%s] is approved", order_id)

    def log_order_cancelled(self, order_id: object) -> None:
        """Final cancellation produces no event; the handler reports it explicitly."""
        self._log.info("Order with id [%s] is cancelled", order_id)
