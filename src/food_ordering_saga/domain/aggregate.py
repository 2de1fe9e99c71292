"""Aggregate Root base class with Generic ID support."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, PrivateAttr

if TYPE_CHECKING:
    from ..primitives.id_generator import IIDGenerator

ID = TypeVar("ID", str, int, UUID)


class AggregateRoot(BaseModel, Generic[ID]):
    """Base class for all Aggregate Roots.

    Generic over ``ID`` to support UUID, int, or str primary keys.
    Aggregates are mutated in place by the saga services; the ``version``
    is managed by the persistence layer for optimistic locking.

    Usage::

        class Payment(AggregateRoot[UUID]):
            status: PaymentStatus | None = None

        # ID generated automatically with generator
        payment = Payment(id_generator=generator, order_id=order_id, ...)

        # ID provided explicitly
        payment = Payment(id=some_id, order_id=order_id, ...)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: ID
    _version: int = PrivateAttr(default=0)

    def __init__(
        self, id_generator: IIDGenerator | None = None, **data: object
    ) -> None:
        """
        Initialize an Aggregate Root.

        Args:
            id_generator: Optional ID generator strategy. If provided and 'id'
                         is not in data, ID will be auto-generated.
            **data: Aggregate attributes. Must include 'id' OR have
                id_generator provided. ``_version`` restores a persisted version.

        Raises:
            ValueError: If neither 'id' is provided nor id_generator is supplied.
        """
        version = data.pop("_version", 0)
        if "id" not in data and id_generator is not None:
            data = {**data, "id": id_generator.next_id()}
        elif "id" not in data:
            raise ValueError(
                "Either 'id' must be provided or 'id_generator' must be supplied "
                "to auto-generate the ID at initialization time."
            )

        super().__init__(**data)
        object.__setattr__(self, "_version", version)

    @property
    def version(self) -> int:
        """Read-only version, managed by the persistence layer."""
        return self._version

    def increment_version(self) -> None:
        """Bump the version after a successful save."""
        object.__setattr__(self, "_version", self._version + 1)
