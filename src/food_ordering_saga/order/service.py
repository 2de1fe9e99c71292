"""OrderDomainService — order side of the payment saga."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..primitives.clock import UTCClock
from ..primitives.exceptions import ProductNotFoundError, RestaurantUnavailableError
from ..primitives.id_generator import UUID4Generator
from .events import OrderCancelledEvent, OrderCreatedEvent, OrderPaidEvent

if TYPE_CHECKING:
    from ..primitives.clock import IClock
    from ..primitives.id_generator import IIDGenerator
    from .entities import Order, Restaurant


class OrderDomainService:
    """Drives the Order state machine and decides the next order event.

    Every method mutates the given :class:`Order` in place. Hard failures
    raise :class:`~food_ordering_saga.primitives.exceptions.OrderDomainError`
    and produce no event.

    Usage::

        service = OrderDomainService(clock=FixedClock(now))
        event = service.validate_and_initiate_order(order, restaurant)
    """

    def __init__(
        self,
        clock: IClock | None = None,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._clock = clock or UTCClock()
        self._id_generator = id_generator or UUID4Generator()

    def validate_and_initiate_order(
        self, order: Order, restaurant: Restaurant
    ) -> OrderCreatedEvent:
        """Check the restaurant, reconcile prices, validate and initialize.

        Prices are reconciled against the catalog *before* validation, since
        the total is checked against the confirmed item prices.
        """
        self._validate_restaurant(restaurant)
        self._set_order_product_information(order, restaurant)
        order.validate_order()
        order.initialize(tracking_id=self._id_generator.next_id())
        return OrderCreatedEvent(
            order=order, aggregate_id=str(order.id), created_at=self._clock.now()
        )

    def pay_order(self, order: Order) -> OrderPaidEvent:
        order.pay()
        return OrderPaidEvent(
            order=order, aggregate_id=str(order.id), created_at=self._clock.now()
        )

    def approve_order(self, order: Order) -> None:
        order.approve()

    def cancel_order_payment(
        self, order: Order, failure_messages: list[str]
    ) -> OrderCancelledEvent:
        order.init_cancel(failure_messages)
        return OrderCancelledEvent(
            order=order,
            aggregate_id=str(order.id),
            created_at=self._clock.now(),
            failure_messages=tuple(failure_messages),
        )

    def cancel_order(self, order: Order, failure_messages: list[str]) -> None:
        order.cancel(failure_messages)

    # ── Helpers ──────────────────────────────────────────────────

    @staticmethod
    def _validate_restaurant(restaurant: Restaurant) -> None:
        if not restaurant.active:
            raise RestaurantUnavailableError(restaurant.id)

    @staticmethod
    def _set_order_product_information(order: Order, restaurant: Restaurant) -> None:
        products = restaurant.product_map()
        for item in order.items:
            confirmed = products.get(item.product.id)
            if confirmed is None:
                raise ProductNotFoundError(item.product.id, restaurant.id)
            item.product.update_with_confirmed_name_and_price(
                confirmed.name, confirmed.price
            )
