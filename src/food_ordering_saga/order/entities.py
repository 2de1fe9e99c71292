"""Order aggregate, its line items and the restaurant catalog snapshot."""

from __future__ import annotations

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..domain.aggregate import AggregateRoot
from ..domain.value_object import Money
from ..primitives.exceptions import OrderDomainError


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    APPROVED = "APPROVED"
    CANCELLING = "CANCELLING"
    CANCELLED = "CANCELLED"


class Product(BaseModel):
    """A product as seen by an order line, or as listed in a catalog."""

    id: UUID
    name: str | None = None
    price: Money = Field(default_factory=Money.zero)

    def update_with_confirmed_name_and_price(
        self, name: str | None, price: Money
    ) -> None:
        self.name = name
        self.price = price


class OrderItem(BaseModel):
    """A priced line item. Its unit price is always the product's price."""

    id: int | None = None
    product: Product
    quantity: int

    @property
    def price(self) -> Money:
        return self.product.price

    @property
    def sub_total(self) -> Money:
        return self.price * self.quantity

    def is_price_valid(self) -> bool:
        return self.price.is_greater_than_zero() and self.quantity > 0


class Restaurant(BaseModel):
    """Read-only catalog snapshot taken at validation time."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    active: bool
    products: tuple[Product, ...] = ()

    def product_map(self) -> dict[UUID, Product]:
        """Index the catalog by product id."""
        return {product.id: product for product in self.products}


class Order(AggregateRoot[UUID]):
    """A customer's order.

    State machine::

        PENDING ──pay──▶ PAID ──approve──▶ APPROVED
           │               │
           │            init_cancel
           │               ▼
           └──cancel──▶ CANCELLED ◀──cancel── CANCELLING
    """

    customer_id: UUID
    restaurant_id: UUID
    price: Money
    items: list[OrderItem] = Field(default_factory=list)
    tracking_id: UUID | None = None
    status: OrderStatus = OrderStatus.PENDING
    failure_messages: list[str] = Field(default_factory=list)

    # ── Validation ───────────────────────────────────────────────

    def validate_order(self) -> None:
        """Raise :class:`OrderDomainError` on the first structural violation."""
        self._validate_initial_order()
        self._validate_total_price()
        self._validate_items_price()

    def _validate_initial_order(self) -> None:
        if self.tracking_id is not None or self.status is not OrderStatus.PENDING:
            raise OrderDomainError("Order is not in correct state for initialization!")

    def _validate_total_price(self) -> None:
        if not self.price.is_greater_than_zero():
            raise OrderDomainError("Total price must be greater than zero!")

    def _validate_items_price(self) -> None:
        items_total = Money.zero()
        for item in self.items:
            if not item.is_price_valid():
                raise OrderDomainError(
                    f"Order item price: {item.price} is not valid "
                    f"for product {item.product.id}"
                )
            items_total = items_total + item.sub_total

        if self.price != items_total:
            raise OrderDomainError(
                f"Total price: {self.price} is not equal to "
                f"Order items total: {items_total}!"
            )

    # ── Transitions ──────────────────────────────────────────────

    def initialize(self, tracking_id: UUID) -> None:
        self.tracking_id = tracking_id
        self.status = OrderStatus.PENDING
        for item_id, item in enumerate(self.items, start=1):
            item.id = item_id

    def pay(self) -> None:
        if self.status is not OrderStatus.PENDING:
            raise OrderDomainError("Order is not in correct state for pay operation!")
        self.status = OrderStatus.PAID

    def approve(self) -> None:
        if self.status is not OrderStatus.PAID:
            raise OrderDomainError(
                "Order is not in correct state for approve operation!"
            )
        self.status = OrderStatus.APPROVED

    def init_cancel(self, failure_messages: list[str]) -> None:
        if self.status is not OrderStatus.PAID:
            raise OrderDomainError(
                "Order is not in correct state for initCancel operation!"
            )
        self.status = OrderStatus.CANCELLING
        self._update_failure_messages(failure_messages)

    def cancel(self, failure_messages: list[str]) -> None:
        if self.status not in (OrderStatus.CANCELLING, OrderStatus.PENDING):
            raise OrderDomainError(
                "Order is not in correct state for cancel operation!"
            )
        self.status = OrderStatus.CANCELLED
        self._update_failure_messages(failure_messages)

    def _update_failure_messages(self, failure_messages: list[str]) -> None:
        self.failure_messages.extend(message for message in failure_messages if message)
