"""Transport acknowledgment contract."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol, TypeAlias, runtime_checkable

from pydantic import BaseModel, ConfigDict


class DeliveryResult(BaseModel):
    """Where a message landed once the transport acknowledged it."""

    model_config = ConfigDict(frozen=True)

    destination: str
    partition: int
    offset: int
    timestamp: datetime | None = None


DeliveryCallback: TypeAlias = Callable[
    [DeliveryResult | None, BaseException | None], None
]
"""Called exactly once per publish: ``(result, None)`` or ``(None, error)``."""


@runtime_checkable
class IEventTransport(Protocol):
    """
    Port for handing a message to a transport (Kafka, in-memory, ...).

    Fire-and-forget: ``publish`` returns once the message is handed off.
    The delivery outcome arrives later through ``on_result`` and is only
    observed, never retried on.
    """

    async def publish(
        self,
        destination: str,
        partition_key: str,
        payload: Any,
        on_result: DeliveryCallback | None = None,
    ) -> None:
        """
        Hand *payload* to *destination*.

        Args:
            destination: Topic, queue or channel name.
            partition_key: Key that keeps one aggregate's messages ordered.
            payload: Usually a ``MessageEnvelope``.
            on_result: Acknowledgment callback.
        """
        ...
