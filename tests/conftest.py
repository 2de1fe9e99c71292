"""Shared fixtures: a fixed clock, recorded ids, a catalog and a ledger."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from food_ordering_saga.domain.value_object import Money
from food_ordering_saga.order.entities import Order, OrderItem, Product, Restaurant
from food_ordering_saga.order.events import OrderCreatedEvent
from food_ordering_saga.order.service import OrderDomainService
from food_ordering_saga.payment.entities import (
    CreditEntry,
    CreditHistory,
    Payment,
    TransactionType,
)
from food_ordering_saga.payment.service import PaymentDomainService
from food_ordering_saga.primitives.clock import FixedClock

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class RecordingIdGenerator:
    """Hands out fresh UUIDs and remembers them."""

    def __init__(self) -> None:
        self.issued: list[UUID] = []

    def next_id(self) -> UUID:
        new_id = uuid4()
        self.issued.append(new_id)
        return new_id


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock(now: datetime) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def id_generator() -> RecordingIdGenerator:
    return RecordingIdGenerator()


@pytest.fixture
def order_service(
    clock: FixedClock, id_generator: RecordingIdGenerator
) -> OrderDomainService:
    return OrderDomainService(clock=clock, id_generator=id_generator)


@pytest.fixture
def payment_service(
    clock: FixedClock, id_generator: RecordingIdGenerator
) -> PaymentDomainService:
    return PaymentDomainService(clock=clock, id_generator=id_generator)


@pytest.fixture
def customer_id() -> UUID:
    return uuid4()


@pytest.fixture
def burger() -> Product:
    return Product(id=uuid4(), name="Burger", price=Money(amount="12.50"))


@pytest.fixture
def fries() -> Product:
    return Product(id=uuid4(), name="Fries", price=Money(amount="3.00"))


@pytest.fixture
def restaurant(burger: Product, fries: Product) -> Restaurant:
    return Restaurant(id=uuid4(), active=True, products=(burger, fries))


@pytest.fixture
def make_order(
    customer_id: UUID, restaurant: Restaurant, burger: Product, fries: Product
) -> Callable[..., Order]:
    """Build an order as a client would submit it: stale names and prices."""

    def _make(
        total: str = "28.00", burgers: int = 2, portions_of_fries: int = 1
    ) -> Order:
        return Order(
            id=uuid4(),
            customer_id=customer_id,
            restaurant_id=restaurant.id,
            price=Money(amount=total),
            items=[
                OrderItem(
                    product=Product(
                        id=burger.id,
                        name="burger (old menu)",
                        price=Money(amount="9.99"),
                    ),
                    quantity=burgers,
                ),
                OrderItem(
                    product=Product(id=fries.id, price=Money(amount="1.00")),
                    quantity=portions_of_fries,
                ),
            ],
        )

    return _make


@pytest.fixture
def make_credit_entry(customer_id: UUID) -> Callable[[str], CreditEntry]:
    def _make(amount: str) -> CreditEntry:
        return CreditEntry(
            id=uuid4(),
            customer_id=customer_id,
            total_credit_amount=Money(amount=amount),
        )

    return _make


@pytest.fixture
def make_history(customer_id: UUID) -> Callable[[TransactionType, str], CreditHistory]:
    def _make(transaction_type: TransactionType, amount: str) -> CreditHistory:
        return CreditHistory(
            id=uuid4(),
            customer_id=customer_id,
            transaction_type=transaction_type,
            amount=Money(amount=Decimal(amount)),
        )

    return _make


@pytest.fixture
def make_payment(customer_id: UUID) -> Callable[[str], Payment]:
    def _make(price: str) -> Payment:
        return Payment(
            id=uuid4(),
            order_id=uuid4(),
            customer_id=customer_id,
            price=Money(amount=price),
        )

    return _make


@pytest.fixture
def created_event(
    order_service: OrderDomainService,
    make_order: Callable[..., Order],
    restaurant: Restaurant,
) -> OrderCreatedEvent:
    return order_service.validate_and_initiate_order(make_order(), restaurant)
