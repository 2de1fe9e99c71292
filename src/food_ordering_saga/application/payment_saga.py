"""Payment leg of the saga: request in, ledger update, response out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..payment.entities import Payment
from ..payment.events import PaymentFailedEvent
from ..primitives.exceptions import EntityNotFoundError
from ..primitives.id_generator import UUID4Generator
from .dto import PaymentOrderStatus

if TYPE_CHECKING:
    from uuid import UUID

    from ..messaging.dispatcher import SagaEventDispatcher
    from ..payment.entities import CreditEntry, CreditHistory
    from ..payment.events import PaymentEvent
    from ..payment.service import PaymentDomainService
    from ..ports.repository import ICreditLedgerRepository, IRepository
    from ..primitives.id_generator import IIDGenerator
    from .dto import PaymentRequest

logger = logging.getLogger("food_ordering_saga.application")


class PaymentSagaHandler:
    """Applies payment requests to the credit ledger.

    The payment is always persisted, with its FAILED status when the step
    failed. The credit entry and the new history entry are persisted only
    when the step succeeded; on failure the ledger mutation made by the
    domain service is discarded.

    Entry and history are loaded as one snapshot. When another step saved
    the same ledger in the meantime, ``OptimisticLockingError`` propagates
    and neither the payment nor the ledger is stored.
    """

    def __init__(
        self,
        payments: IRepository[Payment],
        ledger: ICreditLedgerRepository,
        service: PaymentDomainService,
        dispatcher: SagaEventDispatcher,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._payments = payments
        self._ledger = ledger
        self._service = service
        self._dispatcher = dispatcher
        self._id_generator = id_generator or UUID4Generator()

    async def on_payment_request(self, request: PaymentRequest) -> PaymentEvent:
        logger.debug(
            "Payment request %s for order [%s]",
            request.order_status.value,
            request.order_id,
        )
        if request.order_status is PaymentOrderStatus.PENDING:
            return await self.complete_payment(request)
        return await self.cancel_payment(request)

    async def complete_payment(self, request: PaymentRequest) -> PaymentEvent:
        payment = Payment(
            id_generator=self._id_generator,
            order_id=request.order_id,
            customer_id=request.customer_id,
            price=request.price,
        )
        credit_entry, credit_histories = await self._load_ledger(request.customer_id)
        failure_messages: list[str] = []

        event = self._service.validate_and_initialize_payment(
            payment, credit_entry, credit_histories, failure_messages
        )
        await self._persist(payment, credit_entry, credit_histories, event)
        await self._dispatcher.dispatch([event])
        return event

    async def cancel_payment(self, request: PaymentRequest) -> PaymentEvent:
        payment = await self._find_by_order(request.order_id)
        credit_entry, credit_histories = await self._load_ledger(payment.customer_id)
        failure_messages: list[str] = []

        event = self._service.validate_and_cancel_payment(
            payment, credit_entry, credit_histories, failure_messages
        )
        await self._persist(payment, credit_entry, credit_histories, event)
        await self._dispatcher.dispatch([event])
        return event

    # ── Helpers ──────────────────────────────────────────────────

    async def _load_ledger(
        self, customer_id: UUID
    ) -> tuple[CreditEntry, list[CreditHistory]]:
        ledger = await self._ledger.get_ledger(customer_id)
        if ledger is None:
            raise EntityNotFoundError("CreditEntry", customer_id)
        return ledger

    async def _find_by_order(self, order_id: UUID) -> Payment:
        for payment in await self._payments.list_all():
            if payment.order_id == order_id:
                return payment
        raise EntityNotFoundError("Payment", order_id)

    async def _persist(
        self,
        payment: Payment,
        credit_entry: CreditEntry,
        credit_histories: list[CreditHistory],
        event: PaymentEvent,
    ) -> None:
        # The ledger save is the version-checked one; a stale ledger aborts the
        # step before the payment is stored.
        if not isinstance(event, PaymentFailedEvent):
            await self._ledger.save(credit_entry, credit_histories)
        await self._payments.add(payment)
