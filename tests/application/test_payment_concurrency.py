"""Concurrent payment steps against one customer's credit ledger."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

import pytest
import pytest_asyncio

from food_ordering_saga.adapters.memory.repository import (
    InMemoryCreditLedgerRepository,
    InMemoryRepository,
)
from food_ordering_saga.application.bootstrap import build_payment_dispatcher
from food_ordering_saga.application.dto import PaymentOrderStatus, PaymentRequest
from food_ordering_saga.application.payment_saga import PaymentSagaHandler
from food_ordering_saga.domain.value_object import Money
from food_ordering_saga.messaging.memory import InMemoryTransport
from food_ordering_saga.payment.entities import (
    CreditEntry,
    CreditHistory,
    Payment,
    PaymentStatus,
    TransactionType,
)
from food_ordering_saga.payment.events import PaymentCompletedEvent
from food_ordering_saga.primitives.exceptions import OptimisticLockingError

if TYPE_CHECKING:
    from food_ordering_saga.payment.service import PaymentDomainService


class SlowLedger(InMemoryCreditLedgerRepository):
    """Yields to the event loop after every read, like a real round trip."""

    async def get_ledger(
        self, customer_id: UUID
    ) -> tuple[CreditEntry, list[CreditHistory]] | None:
        ledger = await super().get_ledger(customer_id)
        await asyncio.sleep(0)
        return ledger


@pytest_asyncio.fixture
async def ledger(customer_id: UUID) -> SlowLedger:
    repo = SlowLedger()
    await repo.save(
        CreditEntry(
            id=uuid4(),
            customer_id=customer_id,
            total_credit_amount=Money(amount="100.00"),
        ),
        [
            CreditHistory(
                id=uuid4(),
                customer_id=customer_id,
                transaction_type=TransactionType.CREDIT,
                amount=Money(amount="100.00"),
            )
        ],
    )
    return repo


def _request(customer_id: UUID) -> PaymentRequest:
    return PaymentRequest(
        order_id=uuid4(),
        customer_id=customer_id,
        price=Money(amount="30.00"),
        order_status=PaymentOrderStatus.PENDING,
    )


@pytest.mark.asyncio
async def test_stale_ledger_save_stores_nothing(
    ledger: SlowLedger,
    payment_service: PaymentDomainService,
    customer_id: UUID,
) -> None:
    payments = InMemoryRepository[Payment]()
    transport = InMemoryTransport()
    handler = PaymentSagaHandler(
        payments, ledger, payment_service, build_payment_dispatcher(transport)
    )

    results = await asyncio.gather(
        handler.complete_payment(_request(customer_id)),
        handler.complete_payment(_request(customer_id)),
        return_exceptions=True,
    )

    assert isinstance(results[0], PaymentCompletedEvent)
    assert isinstance(results[1], OptimisticLockingError)

    [stored] = await payments.list_all()
    assert stored.status is PaymentStatus.COMPLETED
    assert stored.order_id == results[0].payment.order_id

    snapshot = await ledger.get_ledger(customer_id)
    assert snapshot is not None
    entry, history = snapshot
    assert entry.total_credit_amount == Money(amount="70.00")
    assert [h.transaction_type for h in history] == [
        TransactionType.CREDIT,
        TransactionType.DEBIT,
    ]
    assert len(transport.get_published()) == 1


@pytest.mark.asyncio
async def test_sequential_payments_see_each_other(
    ledger: SlowLedger,
    payment_service: PaymentDomainService,
    customer_id: UUID,
) -> None:
    payments = InMemoryRepository[Payment]()
    dispatcher = build_payment_dispatcher(InMemoryTransport())
    handler = PaymentSagaHandler(payments, ledger, payment_service, dispatcher)

    first = await handler.complete_payment(_request(customer_id))
    second = await handler.complete_payment(_request(customer_id))

    assert isinstance(first, PaymentCompletedEvent)
    assert isinstance(second, PaymentCompletedEvent)
    snapshot = await ledger.get_ledger(customer_id)
    assert snapshot is not None
    assert snapshot[0].total_credit_amount == Money(amount="40.00")
    assert len(snapshot[1]) == 3
