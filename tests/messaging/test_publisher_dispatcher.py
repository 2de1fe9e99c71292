"""Tests for DomainEventPublisher and SagaEventDispatcher."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock

import pytest

from food_ordering_saga.domain.events import DomainEvent
from food_ordering_saga.messaging.dispatcher import SagaEventDispatcher
from food_ordering_saga.messaging.envelope import MessageEnvelope
from food_ordering_saga.messaging.memory import InMemoryTransport
from food_ordering_saga.messaging.publisher import DomainEventPublisher
from food_ordering_saga.order.events import OrderCreatedEvent, OrderPaidEvent
from food_ordering_saga.order.service import OrderDomainService

# --- DomainEventPublisher ---


@pytest.mark.asyncio
async def test_publisher_keys_by_order_id(created_event: OrderCreatedEvent) -> None:
    transport = InMemoryTransport()
    publisher = DomainEventPublisher(transport, "payment-request")

    await publisher.publish(created_event, correlation_id="corr-9")

    [(destination, key, envelope)] = transport.get_published()
    assert destination == "payment-request"
    assert key == str(created_event.order.id)
    assert isinstance(envelope, MessageEnvelope)
    assert envelope.event_type == "OrderCreatedEvent"
    assert envelope.correlation_id == "corr-9"


@pytest.mark.asyncio
async def test_publisher_swallows_transport_errors(
    created_event: OrderCreatedEvent, caplog: pytest.LogCaptureFixture
) -> None:
    transport = AsyncMock()
    transport.publish.side_effect = ConnectionError("broker down")
    publisher = DomainEventPublisher(transport, "payment-request")

    with caplog.at_level(logging.ERROR, logger="food_ordering_saga.publishers"):
        await publisher.handle(created_event)

    transport.publish.assert_awaited_once()
    assert any(
        "Error while sending OrderCreatedEvent" in r.getMessage()
        for r in caplog.records
    )


@pytest.mark.asyncio
async def test_publisher_passes_delivery_callback(
    created_event: OrderCreatedEvent,
) -> None:
    transport = AsyncMock()
    publisher = DomainEventPublisher(transport, "payment-request")

    await publisher.publish(created_event)

    args = transport.publish.await_args.args
    assert args[0] == "payment-request"
    assert args[1] == str(created_event.order.id)
    assert callable(args[3])


# --- SagaEventDispatcher ---


class _Collector:
    def __init__(self) -> None:
        self.seen: list[str] = []

    async def handle(self, event: DomainEvent) -> None:
        self.seen.append(event.event_type)


@pytest.mark.asyncio
async def test_dispatch_routes_by_exact_type_in_order(
    created_event: OrderCreatedEvent, order_service: OrderDomainService
) -> None:
    paid_event = order_service.pay_order(created_event.order.model_copy(deep=True))
    dispatcher = SagaEventDispatcher()
    created_handler = _Collector()
    calls: list[str] = []
    dispatcher.register(OrderCreatedEvent, created_handler)
    dispatcher.register(OrderPaidEvent, lambda e: calls.append(e.event_type))

    await dispatcher.dispatch([paid_event, created_event, paid_event])

    assert created_handler.seen == ["OrderCreatedEvent"]
    assert calls == ["OrderPaidEvent", "OrderPaidEvent"]


@pytest.mark.asyncio
async def test_register_is_idempotent(created_event: OrderCreatedEvent) -> None:
    dispatcher = SagaEventDispatcher()
    handler = _Collector()
    dispatcher.register(OrderCreatedEvent, handler)
    dispatcher.register(OrderCreatedEvent, handler)

    await dispatcher.dispatch([created_event])

    assert handler.seen == ["OrderCreatedEvent"]
    assert dispatcher.get_registered_handlers() == {OrderCreatedEvent: [handler]}


@pytest.mark.asyncio
async def test_unregistered_events_are_ignored(
    created_event: OrderCreatedEvent,
) -> None:
    dispatcher = SagaEventDispatcher()
    dispatcher.register(OrderPaidEvent, _Collector())
    dispatcher.clear()

    await dispatcher.dispatch([created_event])

    assert dispatcher.get_registered_handlers() == {}


@pytest.mark.asyncio
async def test_handler_failure_propagates(created_event: OrderCreatedEvent) -> None:
    dispatcher = SagaEventDispatcher()

    def broken(event: DomainEvent) -> None:
        raise RuntimeError("handler bug")

    dispatcher.register(OrderCreatedEvent, broken)

    with pytest.raises(RuntimeError, match="handler bug"):
        await dispatcher.dispatch([created_event])
