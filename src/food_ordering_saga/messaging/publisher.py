"""DomainEventPublisher — hands saga events to a transport."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .callbacks import make_delivery_callback
from .envelope import MessageEnvelope

if TYPE_CHECKING:
    from ..domain.events import DomainEvent
    from ..ports.transport import IEventTransport

logger = logging.getLogger("food_ordering_saga.publishers")


class DomainEventPublisher:
    """Publishes events of one saga leg to a single destination.

    The partition key is the order id (``event.saga_id``), so every message of
    one saga keeps its order on the wire. Transport errors are logged and
    swallowed here: a failed hand-off must never roll back a saga step that
    has already been persisted.

    Usage::

        publisher = DomainEventPublisher(transport, config.payment_request_topic)
        dispatcher.register(OrderCreatedEvent, publisher)
    """

    def __init__(self, transport: IEventTransport, destination: str) -> None:
        self._transport = transport
        self._destination = destination

    @property
    def destination(self) -> str:
        return self._destination

    async def publish(self, event: DomainEvent, **kwargs: Any) -> None:
        partition_key = str(getattr(event, "saga_id", None) or event.aggregate_id)
        envelope = MessageEnvelope.from_event(
            event, correlation_id=kwargs.get("correlation_id")
        )
        logger.info("Received %s for key [%s]", envelope.event_type, partition_key)
        try:
            await self._transport.publish(
                self._destination,
                partition_key,
                envelope,
                make_delivery_callback(self._destination, partition_key, envelope),
            )
        except Exception:
            logger.exception(
                "Error while sending %s to [%s] with key [%s]",
                envelope.event_type,
                self._destination,
                partition_key,
            )
            return
        logger.info(
            "%s handed to [%s] for key [%s]",
            envelope.event_type,
            self._destination,
            partition_key,
        )

    async def handle(self, event: DomainEvent) -> None:
        """Dispatcher entry point."""
        await self.publish(event)
