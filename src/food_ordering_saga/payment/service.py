"""PaymentDomainService — credit ledger side of the payment saga."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..primitives.clock import UTCClock
from ..primitives.id_generator import UUID4Generator
from .entities import CreditHistory, PaymentStatus, TransactionType
from .events import (
    PaymentCancelledEvent,
    PaymentCompletedEvent,
    PaymentEvent,
    PaymentFailedEvent,
)
from .ledger import check_ledger_consistency

if TYPE_CHECKING:
    from ..primitives.clock import IClock
    from ..primitives.id_generator import IIDGenerator
    from .entities import CreditEntry, Payment


class PaymentDomainService:
    """Applies a payment to the credit ledger and decides the payment event.

    Violations are *collected*, not raised: every check appends to the
    caller's ``failure_messages`` list and the call always returns an event,
    :class:`PaymentFailedEvent` when the list is non-empty.

    The ledger mutation (balance change plus one appended history entry) is
    applied before the ledger-wide check, whatever the earlier checks found.
    On a failed event the caller must not persist the credit entry or the
    history.
    """

    def __init__(
        self,
        clock: IClock | None = None,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._clock = clock or UTCClock()
        self._id_generator = id_generator or UUID4Generator()

    def validate_and_initialize_payment(
        self,
        payment: Payment,
        credit_entry: CreditEntry,
        credit_histories: list[CreditHistory],
        failure_messages: list[str],
    ) -> PaymentEvent:
        self._validate_payment(payment, credit_entry, failure_messages)
        payment.initialize(self._clock.now())

        self._validate_credit_entry(payment, credit_entry, failure_messages)
        credit_entry.subtract_credit_amount(payment.price)
        self._update_credit_history(payment, credit_histories, TransactionType.DEBIT)
        failure_messages.extend(
            check_ledger_consistency(credit_entry, credit_histories)
        )

        if not failure_messages:
            payment.update_status(PaymentStatus.COMPLETED)
            return PaymentCompletedEvent(
                payment=payment,
                aggregate_id=str(payment.id),
                created_at=self._clock.now(),
            )
        return self._failed(payment, failure_messages)

    def validate_and_cancel_payment(
        self,
        payment: Payment,
        credit_entry: CreditEntry,
        credit_histories: list[CreditHistory],
        failure_messages: list[str],
    ) -> PaymentEvent:
        self._validate_payment(payment, credit_entry, failure_messages)

        credit_entry.add_credit_amount(payment.price)
        self._update_credit_history(payment, credit_histories, TransactionType.CREDIT)
        failure_messages.extend(
            check_ledger_consistency(credit_entry, credit_histories)
        )

        if not failure_messages:
            payment.update_status(PaymentStatus.CANCELLED)
            return PaymentCancelledEvent(
                payment=payment,
                aggregate_id=str(payment.id),
                created_at=self._clock.now(),
            )
        return self._failed(payment, failure_messages)

    # ── Helpers ──────────────────────────────────────────────────

    def _failed(
        self, payment: Payment, failure_messages: list[str]
    ) -> PaymentFailedEvent:
        payment.update_status(PaymentStatus.FAILED)
        return PaymentFailedEvent(
            payment=payment,
            aggregate_id=str(payment.id),
            created_at=self._clock.now(),
            failure_messages=tuple(failure_messages),
        )

    @staticmethod
    def _validate_payment(
        payment: Payment, credit_entry: CreditEntry, failure_messages: list[str]
    ) -> None:
        payment.validate_payment(failure_messages)
        if payment.customer_id != credit_entry.customer_id:
            failure_messages.append(
                f"Payment customer id [{payment.customer_id}] does not match "
                f"credit entry customer id [{credit_entry.customer_id}]!"
            )

    @staticmethod
    def _validate_credit_entry(
        payment: Payment, credit_entry: CreditEntry, failure_messages: list[str]
    ) -> None:
        # Compared against the balance before the debit is applied.
        if payment.price > credit_entry.total_credit_amount:
            failure_messages.append(
                f"Customer with id [{credit_entry.customer_id}] doesn't have "
                "enough credit for payment!"
            )

    def _update_credit_history(
        self,
        payment: Payment,
        credit_histories: list[CreditHistory],
        transaction_type: TransactionType,
    ) -> None:
        credit_histories.append(
            CreditHistory(
                id=self._id_generator.next_id(),
                customer_id=payment.customer_id,
                transaction_type=transaction_type,
                amount=payment.price,
            )
        )
