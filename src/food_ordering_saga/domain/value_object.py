"""Immutable Value Object base class and the Money value object."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal

from pydantic import BaseModel, ConfigDict, field_validator

_CENTS = Decimal("0.01")


class ValueObject(BaseModel):
    """Base class for Value Objects.

    Value objects are immutable and defined by their attributes.
    Equality is structural (all fields compared).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.model_dump().items())))


class Money(ValueObject):
    """A monetary amount, always held at two decimal places.

    Rounding uses banker's rounding so sums of many small amounts do not
    drift in one direction.

    Usage::

        price = Money(amount="12.50")
        total = price * 2 + Money(amount=5)
    """

    amount: Decimal = Decimal("0.00")

    @field_validator("amount", mode="after")
    @classmethod
    def _scale(cls, value: Decimal) -> Decimal:
        return value.quantize(_CENTS, rounding=ROUND_HALF_EVEN)

    @classmethod
    def zero(cls) -> Money:
        return cls(amount=Decimal("0.00"))

    def is_greater_than_zero(self) -> bool:
        return self.amount > 0

    # ── Arithmetic ───────────────────────────────────────────────

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(amount=self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(amount=self.amount - other.amount)

    def __mul__(self, multiplier: int) -> Money:
        if not isinstance(multiplier, int):
            return NotImplemented
        return Money(amount=self.amount * multiplier)

    __rmul__ = __mul__

    # ── Ordering ─────────────────────────────────────────────────

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount >= other.amount

    def __str__(self) -> str:
        return str(self.amount)
