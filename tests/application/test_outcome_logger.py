"""Tests for SagaOutcomeLogger."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from food_ordering_saga.observability import SagaOutcomeLogger
from food_ordering_saga.order.events import OrderCreatedEvent
from food_ordering_saga.payment.entities import Payment
from food_ordering_saga.payment.events import PaymentFailedEvent


def test_logs_order_initiated(
    created_event: OrderCreatedEvent, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="food_ordering_saga.saga"):
        SagaOutcomeLogger().handle(created_event)

    [record] = caplog.records
    assert record.levelno == logging.INFO
    assert record.getMessage() == (
        f"Order with id [{created_event.order.id}] is initiated"
    )


def test_failed_payment_logs_warning_and_each_message(
    make_payment: Callable[[str], Payment],
    created_event: OrderCreatedEvent,
    caplog: pytest.LogCaptureFixture,
) -> None:
    payment = make_payment("30.00")
    event = PaymentFailedEvent(
        payment=payment,
        created_at=created_event.created_at,
        failure_messages=("first", "second"),
    )

    with caplog.at_level(logging.INFO, logger="food_ordering_saga.saga"):
        SagaOutcomeLogger().handle(event)

    assert [r.levelno for r in caplog.records] == [
        logging.WARNING,
        logging.ERROR,
        logging.ERROR,
    ]
    assert caplog.records[0].getMessage() == (
        f"Payment is failed for order id [{payment.order_id}]"
    )
    assert caplog.records[2].getMessage() == f"[{payment.order_id}] second"


def test_uses_injected_logger(caplog: pytest.LogCaptureFixture) -> None:
    custom = logging.getLogger("tests.outcomes")

    with caplog.at_level(logging.INFO, logger="tests.outcomes"):
        SagaOutcomeLogger(custom).log_order_approved("order-1")
        SagaOutcomeLogger(custom).log_order_cancelled("order-2")

    assert [r.name for r in caplog.records] == ["tests.outcomes", "tests.outcomes"]
    assert caplog.records[1].getMessage() == "Order with id [order-2] is cancelled"


def test_event_types_cover_every_saga_event() -> None:
    names = sorted(t.__name__ for t in SagaOutcomeLogger.EVENT_TYPES)

    assert names == [
        "OrderCancelledEvent",
        "OrderCreatedEvent",
        "OrderPaidEvent",
        "PaymentCancelledEvent",
        "PaymentCompletedEvent",
        "PaymentFailedEvent",
    ]
