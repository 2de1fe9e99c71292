"""Destination names for saga messages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MessagingConfig(BaseModel):
    """Where each saga message goes.

    Usage::

        config = MessagingConfig(payment_request_topic="payment-request-v2")
    """

    model_config = ConfigDict(frozen=True)

    payment_request_topic: str = "payment-request"
    payment_response_topic: str = "payment-response"
    order_events_topic: str = "order-events"
