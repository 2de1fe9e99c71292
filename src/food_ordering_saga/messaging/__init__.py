"""Messaging: envelopes, serialization, publishing, dispatch and transports.

The Kafka adapter is imported from :mod:`food_ordering_saga.messaging.kafka`.
"""

from __future__ import annotations

from .callbacks import make_delivery_callback
from .config import MessagingConfig
from .dispatcher import SagaEventDispatcher
from .envelope import MessageEnvelope
from .memory import InMemoryTransport
from .publisher import DomainEventPublisher
from .serialization import EnvelopeSerializer

__all__ = [
    "DomainEventPublisher",
    "EnvelopeSerializer",
    "InMemoryTransport",
    "MessageEnvelope",
    "MessagingConfig",
    "SagaEventDispatcher",
    "make_delivery_callback",
]
