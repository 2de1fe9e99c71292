"""OrderSagaHandler — orchestrates the order leg of the payment saga."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..payment.entities import PaymentStatus
from ..primitives.exceptions import EntityNotFoundError

if TYPE_CHECKING:
    from uuid import UUID

    from ..messaging.dispatcher import SagaEventDispatcher
    from ..observability import SagaOutcomeLogger
    from ..order.entities import Order
    from ..order.events import OrderCancelledEvent, OrderCreatedEvent, OrderPaidEvent
    from ..order.service import OrderDomainService
    from ..ports.repository import IRepository, IRestaurantCatalog
    from .dto import PaymentResponse

logger = logging.getLogger("food_ordering_saga.application")


class OrderSagaHandler:
    """One saga step per call: load, decide, persist, dispatch.

    Domain errors propagate to the caller before anything is persisted or
    dispatched. Concurrent steps on the same order are serialized by the
    repository's optimistic locking.
    """

    def __init__(
        self,
        orders: IRepository[Order],
        restaurants: IRestaurantCatalog,
        service: OrderDomainService,
        dispatcher: SagaEventDispatcher,
        outcome_logger: SagaOutcomeLogger | None = None,
    ) -> None:
        self._orders = orders
        self._restaurants = restaurants
        self._service = service
        self._dispatcher = dispatcher
        self._outcome_logger = outcome_logger

    async def initiate_order(self, order: Order) -> OrderCreatedEvent:
        restaurant = await self._restaurants.get_restaurant(order.restaurant_id)
        if restaurant is None:
            raise EntityNotFoundError("Restaurant", order.restaurant_id)

        event = self._service.validate_and_initiate_order(order, restaurant)
        await self._orders.add(order)
        await self._dispatcher.dispatch([event])
        return event

    async def on_payment_response(self, response: PaymentResponse) -> None:
        """Route a payment outcome to the matching order transition."""
        logger.debug(
            "Payment response %s for order [%s]",
            response.payment_status.value,
            response.order_id,
        )
        if response.payment_status is PaymentStatus.COMPLETED:
            await self.on_payment_completed(response)
        elif response.payment_status is PaymentStatus.CANCELLED:
            await self.on_payment_cancelled(response)
        else:
            await self.on_payment_failed(response)

    async def on_payment_completed(self, response: PaymentResponse) -> OrderPaidEvent:
        return await self.pay_order(response.order_id)

    async def on_payment_cancelled(self, response: PaymentResponse) -> None:
        """Refund confirmed: finish the compensation started by ``reject_order``."""
        await self.cancel_order(response.order_id, list(response.failure_messages))

    async def on_payment_failed(self, response: PaymentResponse) -> None:
        await self.cancel_order(response.order_id, list(response.failure_messages))

    async def pay_order(self, order_id: UUID) -> OrderPaidEvent:
        order = await self._load(order_id)
        event = self._service.pay_order(order)
        await self._orders.add(order)
        await self._dispatcher.dispatch([event])
        return event

    async def approve_order(self, order_id: UUID) -> None:
        order = await self._load(order_id)
        self._service.approve_order(order)
        await self._orders.add(order)
        if self._outcome_logger is not None:
            self._outcome_logger.log_order_approved(order_id)

    async def reject_order(
        self, order_id: UUID, failure_messages: list[str]
    ) -> OrderCancelledEvent:
        """Start compensation for a paid order the restaurant turned down."""
        order = await self._load(order_id)
        event = self._service.cancel_order_payment(order, failure_messages)
        await self._orders.add(order)
        await self._dispatcher.dispatch([event])
        return event

    async def cancel_order(self, order_id: UUID, failure_messages: list[str]) -> None:
        order = await self._load(order_id)
        self._service.cancel_order(order, failure_messages)
        await self._orders.add(order)
        if self._outcome_logger is not None:
            self._outcome_logger.log_order_cancelled(order_id)

    async def _load(self, order_id: UUID) -> Order:
        order = await self._orders.get(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)
        return order
