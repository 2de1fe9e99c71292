"""MessageEnvelope — standard immutable wrapper for transport."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ..domain.events import DomainEvent


class MessageEnvelope(BaseModel):
    """Immutable wrapper for messages over the wire.

    Carries the JSON-mode payload of one domain event plus tracing data.
    """

    model_config = ConfigDict(frozen=True)

    message_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = Field(
        ..., description="Event class name, e.g. 'OrderCreatedEvent'"
    )
    payload: dict[str, object] = Field(default_factory=dict)
    correlation_id: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_event(
        cls, event: DomainEvent, *, correlation_id: str | None = None
    ) -> MessageEnvelope:
        """Wrap *event*; the envelope timestamp is the event's creation time."""
        return cls(
            message_id=event.event_id,
            event_type=event.event_type,
            payload=event.model_dump(mode="json"),
            correlation_id=correlation_id,
            timestamp=event.created_at,
        )
