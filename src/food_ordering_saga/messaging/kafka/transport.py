"""KafkaTransport — IEventTransport over aiokafka."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from aiokafka import AIOKafkaProducer

from ...ports.transport import DeliveryResult, IEventTransport
from ..serialization import EnvelopeSerializer

if TYPE_CHECKING:
    from aiokafka.structs import RecordMetadata

    from ...ports.transport import DeliveryCallback
    from .connection import KafkaConnectionManager

logger = logging.getLogger("food_ordering_saga.messaging.kafka")


def _to_delivery_result(metadata: RecordMetadata) -> DeliveryResult:
    timestamp = None
    if metadata.timestamp is not None and metadata.timestamp >= 0:
        timestamp = datetime.fromtimestamp(metadata.timestamp / 1000, tz=timezone.utc)
    return DeliveryResult(
        destination=metadata.topic,
        partition=metadata.partition,
        offset=metadata.offset,
        timestamp=timestamp,
    )


class KafkaTransport(IEventTransport):
    """Kafka adapter implementing IEventTransport.

    ``publish`` enqueues the record with ``AIOKafkaProducer.send`` and returns
    without waiting for the broker; the acknowledgment is reported through
    ``on_result`` when the delivery future resolves.
    """

    def __init__(
        self,
        connection: KafkaConnectionManager,
        *,
        serializer: EnvelopeSerializer | None = None,
    ) -> None:
        self._connection = connection
        self._serializer = serializer or EnvelopeSerializer()
        self._producer: AIOKafkaProducer | None = None

    async def _get_producer(self) -> AIOKafkaProducer:
        """Create or return existing producer."""
        if self._producer is not None:
            return self._producer
        self._producer = AIOKafkaProducer(**self._connection.producer_config())
        await self._producer.start()
        return self._producer

    async def publish(
        self,
        destination: str,
        partition_key: str,
        payload: Any,
        on_result: DeliveryCallback | None = None,
    ) -> None:
        body = self._serializer.to_wire(payload)

        producer = await self._get_producer()
        delivery = await producer.send(
            destination, value=body, key=partition_key.encode("utf-8")
        )
        if on_result is not None:
            delivery.add_done_callback(lambda fut: self._acknowledge(fut, on_result))

    @staticmethod
    def _acknowledge(
        delivery: asyncio.Future[Any], on_result: DeliveryCallback
    ) -> None:
        if delivery.cancelled():
            on_result(None, asyncio.CancelledError())
            return
        error = delivery.exception()
        if error is not None:
            on_result(None, error)
            return
        on_result(_to_delivery_result(delivery.result()), None)

    async def close(self) -> None:
        """Stop the producer, flushing pending records."""
        if self._producer is not None:
            await self._producer.stop()
            self._producer = None

    async def health_check(self) -> bool:
        """Return True if the cluster is reachable."""
        return await self._connection.health_check()
