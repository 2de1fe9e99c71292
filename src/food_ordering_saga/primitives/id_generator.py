import uuid
from typing import Protocol


class IIDGenerator(Protocol):
    """
    Protocol for ID generation strategies.
    Lets tests supply deterministic ids for tracking ids and ledger entries.
    """

    def next_id(self) -> uuid.UUID:
        """Generates the next unique identifier."""
        ...


class UUID4Generator(IIDGenerator):
    """
    Default ID generator using UUIDv4.
    """

    def next_id(self) -> uuid.UUID:
        """Returns a random UUIDv4."""
        return uuid.uuid4()
