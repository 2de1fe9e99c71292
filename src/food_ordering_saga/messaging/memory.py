"""InMemoryTransport — IEventTransport with assertion helpers for tests."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from ..ports.transport import DeliveryResult, IEventTransport

if TYPE_CHECKING:
    from ..ports.transport import DeliveryCallback


class InMemoryTransport(IEventTransport):
    """Buffers published messages and acknowledges them synchronously.

    Every destination is a single partition (``0``) with offsets counting up
    from ``0``. ``fail_with(exc)`` makes subsequent deliveries report *exc*
    through ``on_result`` instead of a :class:`DeliveryResult`.
    """

    def __init__(self) -> None:
        self._messages: list[tuple[str, str, Any]] = []
        self._offsets: dict[str, int] = defaultdict(int)
        self._failure: BaseException | None = None

    async def publish(
        self,
        destination: str,
        partition_key: str,
        payload: Any,
        on_result: DeliveryCallback | None = None,
    ) -> None:
        if self._failure is not None:
            if on_result is not None:
                on_result(None, self._failure)
            return

        self._messages.append((destination, partition_key, payload))
        offset = self._offsets[destination]
        self._offsets[destination] = offset + 1
        if on_result is not None:
            on_result(
                DeliveryResult(
                    destination=destination,
                    partition=0,
                    offset=offset,
                    timestamp=datetime.now(timezone.utc),
                ),
                None,
            )

    def fail_with(self, error: BaseException | None) -> None:
        """Report *error* for every following delivery (``None`` to recover)."""
        self._failure = error

    def get_published(
        self, destination: str | None = None
    ) -> list[tuple[str, str, Any]]:
        """Return all (destination, partition_key, payload) delivered so far."""
        if destination is None:
            return list(self._messages)
        return [m for m in self._messages if m[0] == destination]

    def clear(self) -> None:
        """Forget delivered messages and offsets (for test teardown)."""
        self._messages.clear()
        self._offsets.clear()
        self._failure = None
