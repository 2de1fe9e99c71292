"""Payment aggregate and the customer's credit ledger."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from ..domain.aggregate import AggregateRoot
from ..domain.value_object import Money


class PaymentStatus(str, Enum):
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


class TransactionType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class Payment(AggregateRoot[UUID]):
    """A payment attempt for one order."""

    order_id: UUID
    customer_id: UUID
    price: Money
    status: PaymentStatus | None = None
    created_at: datetime | None = None

    def validate_payment(self, failure_messages: list[str]) -> None:
        """Append structural violations to *failure_messages*."""
        if not self.price.is_greater_than_zero():
            failure_messages.append("Total price must be greater than zero!")

    def initialize(self, created_at: datetime) -> None:
        self.created_at = created_at

    def update_status(self, status: PaymentStatus) -> None:
        self.status = status


class CreditEntry(AggregateRoot[UUID]):
    """A customer's current credit balance."""

    customer_id: UUID
    total_credit_amount: Money

    def add_credit_amount(self, amount: Money) -> None:
        self.total_credit_amount = self.total_credit_amount + amount

    def subtract_credit_amount(self, amount: Money) -> None:
        self.total_credit_amount = self.total_credit_amount - amount


class CreditHistory(BaseModel):
    """One signed movement in the append-only credit ledger."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    customer_id: UUID
    transaction_type: TransactionType
    amount: Money
