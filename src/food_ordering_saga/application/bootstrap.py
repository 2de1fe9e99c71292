"""Wiring of saga events to transport destinations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..messaging.config import MessagingConfig
from ..messaging.dispatcher import SagaEventDispatcher
from ..messaging.publisher import DomainEventPublisher
from ..observability import SagaOutcomeLogger
from ..order.events import OrderCancelledEvent, OrderCreatedEvent, OrderPaidEvent
from ..payment.events import (
    PaymentCancelledEvent,
    PaymentCompletedEvent,
    PaymentFailedEvent,
)

if TYPE_CHECKING:
    from ..ports.transport import IEventTransport


def build_order_dispatcher(
    transport: IEventTransport,
    config: MessagingConfig | None = None,
    outcome_logger: SagaOutcomeLogger | None = None,
) -> SagaEventDispatcher:
    """Order leg: created/cancelled go to the payment side, paid is broadcast."""
    config = config or MessagingConfig()
    outcome_logger = outcome_logger or SagaOutcomeLogger()
    payment_requests = DomainEventPublisher(transport, config.payment_request_topic)
    order_events = DomainEventPublisher(transport, config.order_events_topic)

    dispatcher = SagaEventDispatcher()
    dispatcher.register(OrderCreatedEvent, payment_requests)
    dispatcher.register(OrderCancelledEvent, payment_requests)
    dispatcher.register(OrderPaidEvent, order_events)
    for event_type in (OrderCreatedEvent, OrderCancelledEvent, OrderPaidEvent):
        dispatcher.register(event_type, outcome_logger)
    return dispatcher


def build_payment_dispatcher(
    transport: IEventTransport,
    config: MessagingConfig | None = None,
    outcome_logger: SagaOutcomeLogger | None = None,
) -> SagaEventDispatcher:
    """Payment leg: every outcome goes back to the order side."""
    config = config or MessagingConfig()
    outcome_logger = outcome_logger or SagaOutcomeLogger()
    payment_responses = DomainEventPublisher(transport, config.payment_response_topic)

    dispatcher = SagaEventDispatcher()
    for event_type in (
        PaymentCompletedEvent,
        PaymentCancelledEvent,
        PaymentFailedEvent,
    ):
        dispatcher.register(event_type, payment_responses)
        dispatcher.register(event_type, outcome_logger)
    return dispatcher
