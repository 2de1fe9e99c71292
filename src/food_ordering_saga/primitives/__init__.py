"""Primitives: exceptions, ID generation, clocks."""

from __future__ import annotations

from .clock import FixedClock, IClock, UTCClock
from .exceptions import (
    ConcurrencyError,
    DomainError,
    EntityNotFoundError,
    InfrastructureError,
    MessagingError,
    MessagingSerializationError,
    NotFoundError,
    OptimisticLockingError,
    OrderDomainError,
    OrderingSagaError,
    PersistenceError,
    ProductNotFoundError,
    RestaurantUnavailableError,
)
from .id_generator import IIDGenerator, UUID4Generator

__all__ = [
    "ConcurrencyError",
    "DomainError",
    "EntityNotFoundError",
    "FixedClock",
    "IClock",
    "IIDGenerator",
    "InfrastructureError",
    "MessagingError",
    "MessagingSerializationError",
    "NotFoundError",
    "OptimisticLockingError",
    "OrderDomainError",
    "OrderingSagaError",
    "PersistenceError",
    "ProductNotFoundError",
    "RestaurantUnavailableError",
    "UTCClock",
    "UUID4Generator",
]
