"""SagaEventDispatcher — event type to handler table owned by the orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from inspect import isawaitable
from typing import TYPE_CHECKING, Protocol, TypeAlias, cast

if TYPE_CHECKING:
    from ..domain.events import DomainEvent

logger = logging.getLogger(__name__)


class EventHandlerProtocol(Protocol):
    """Handler object with a ``handle(event)`` method."""

    def handle(self, event: DomainEvent) -> Awaitable[None] | None:
        ...


EventHandler: TypeAlias = (
    "Callable[[DomainEvent], Awaitable[None] | None] | EventHandlerProtocol"
)


class SagaEventDispatcher:
    """Routes each event the saga services return to its handlers.

    Events stay plain data; which transport, logger or follow-up a variant
    triggers is decided here, by registration. Handlers run in registration
    order. A failing handler is logged and its exception propagates.

    Usage::

        dispatcher = SagaEventDispatcher()
        dispatcher.register(OrderCreatedEvent, payment_request_publisher)
        dispatcher.register(OrderCreatedEvent, outcome_logger)
        await dispatcher.dispatch([event])
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = {}

    # ── Registration ─────────────────────────────────────────────

    def register(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register a handler for a specific event type."""
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    # ── Dispatching ──────────────────────────────────────────────

    async def dispatch(self, events: list[DomainEvent]) -> None:
        """Dispatch events, in order, to every handler registered for their type."""
        for event in events:
            handlers = self._handlers.get(type(event), [])
            if not handlers:
                logger.debug("No handler registered for %s", type(event).__name__)
                continue
            for handler in handlers:
                await self._invoke(handler, event)

    async def _invoke(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            if hasattr(handler, "handle"):
                result = cast("EventHandlerProtocol", handler).handle(event)
            elif callable(handler):
                result = handler(event)
            else:
                raise TypeError("Handler must be a callable or have a handle() method")

            if isawaitable(result):
                await result
        except Exception:
            logger.exception(
                "Error executing handler %s for event %s",
                type(handler).__name__,
                type(event).__name__,
            )
            raise

    # ── Introspection ────────────────────────────────────────────

    def get_registered_handlers(self) -> dict[type[DomainEvent], list[EventHandler]]:
        """Return all registered handlers (debugging utility)."""
        return {k: list(v) for k, v in self._handlers.items()}

    def clear(self) -> None:
        """Remove all handler registrations (testing utility)."""
        self._handlers.clear()
