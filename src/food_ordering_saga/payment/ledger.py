"""Credit ledger consistency checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain.value_object import Money
from .entities import TransactionType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .entities import CreditEntry, CreditHistory


def total_amount(
    credit_histories: Iterable[CreditHistory], transaction_type: TransactionType
) -> Money:
    """Sum the amounts of all ledger movements of *transaction_type*."""
    total = Money.zero()
    for history in credit_histories:
        if history.transaction_type is transaction_type:
            total = total + history.amount
    return total


def check_ledger_consistency(
    credit_entry: CreditEntry, credit_histories: list[CreditHistory]
) -> list[str]:
    """Verify that the balance equals the net effect of the ledger.

    Returns one message per violated rule (possibly none). The two rules are
    independent and both may be reported. Nothing is corrected and nothing
    is raised.
    """
    violations: list[str] = []
    total_credit = total_amount(credit_histories, TransactionType.CREDIT)
    total_debit = total_amount(credit_histories, TransactionType.DEBIT)

    if total_debit > total_credit:
        violations.append(
            f"Customer with id [{credit_entry.customer_id}] doesn't have enough "
            "credit according to credit history!"
        )

    if credit_entry.total_credit_amount != total_credit - total_debit:
        violations.append(
            "Credit history total is not equal to current credit for "
            f"customer id [{credit_entry.customer_id}] !"
        )

    return violations
