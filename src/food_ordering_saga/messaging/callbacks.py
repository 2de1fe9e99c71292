"""Delivery acknowledgment callbacks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..ports.transport import DeliveryCallback, DeliveryResult
    from .envelope import MessageEnvelope

logger = logging.getLogger("food_ordering_saga.messaging")


def make_delivery_callback(
    destination: str, partition_key: str, envelope: MessageEnvelope
) -> DeliveryCallback:
    """Build an ``on_result`` callback that logs the delivery outcome.

    The callback only observes; it never retries or re-raises.
    """

    def _on_result(result: DeliveryResult | None, error: BaseException | None) -> None:
        if error is None and result is not None:
            logger.info(
                "Received successful response for key [%s] destination [%s] "
                "partition [%s] offset [%s] timestamp [%s]",
                partition_key,
                result.destination,
                result.partition,
                result.offset,
                result.timestamp,
            )
        else:
            logger.error(
                "Error while sending %s message [%s] to destination [%s]",
                envelope.event_type,
                envelope.message_id,
                destination,
                exc_info=error,
            )

    return _on_result
