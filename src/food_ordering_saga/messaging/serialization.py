"""Wire format for saga messages: UTF-8 JSON of a MessageEnvelope."""

from __future__ import annotations

from typing import Any

from ..primitives.exceptions import MessagingSerializationError
from .envelope import MessageEnvelope


class EnvelopeSerializer:
    """Encodes transport payloads to bytes and decodes envelopes from them.

    Event payloads are already JSON-mode dumps, so pydantic's own JSON
    encoder is enough; no custom ``default`` hook is needed.
    """

    def serialize(self, envelope: MessageEnvelope) -> bytes:
        try:
            return envelope.model_dump_json().encode("utf-8")
        except ValueError as e:
            raise MessagingSerializationError(str(e)) from e

    def to_wire(self, payload: Any) -> bytes:
        """Bytes for a transport payload: an envelope, or pre-encoded bytes."""
        if isinstance(payload, MessageEnvelope):
            return self.serialize(payload)
        if isinstance(payload, bytes):
            return payload
        raise MessagingSerializationError(
            f"Cannot send payload of type {type(payload).__name__}"
        )

    def deserialize(self, raw: bytes) -> MessageEnvelope:
        """Decode *raw*; malformed JSON, bad UTF-8 and schema errors all raise
        :class:`MessagingSerializationError`."""
        try:
            return MessageEnvelope.model_validate_json(raw)
        except ValueError as e:
            raise MessagingSerializationError(str(e)) from e
