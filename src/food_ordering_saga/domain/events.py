"""Domain Event base class."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DomainEvent(BaseModel):
    """Base class for all Domain Events.

    Events are immutable snapshots of a completed saga step. They carry no
    transport reference and no behavior; dispatching them is the job of the
    orchestrator.

    ``created_at`` has no default: it is always stamped from the clock the
    saga service was built with, so tests can pin it.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime
    aggregate_id: str | None = Field(
        default=None, description="ID of the aggregate instance this event belongs to"
    )
    aggregate_type: str | None = Field(
        default=None,
        description="Class name of the aggregate (e.g., 'Order', 'Payment')",
    )

    @field_validator("created_at", mode="after")
    @classmethod
    def _require_timezone(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")
        return value

    @property
    def event_type(self) -> str:
        return type(self).__name__
