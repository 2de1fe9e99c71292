"""Domain and infrastructure exceptions for food-ordering-saga."""

from __future__ import annotations


class OrderingSagaError(Exception):
    """Root exception for the whole package."""


class DomainError(OrderingSagaError):
    """Base class for all domain-related errors.

    Domain errors are *hard* failures: the saga step is aborted, no event is
    produced and nothing from the call may be persisted or published.
    """


class OrderDomainError(DomainError):
    """Raised when an order operation violates the order state machine or
    the order's structural rules."""


class RestaurantUnavailableError(OrderDomainError):
    """Raised when an order is placed against an inactive restaurant."""

    def __init__(self, restaurant_id: object) -> None:
        self.restaurant_id = restaurant_id
        super().__init__(
            f"Restaurant with id [{restaurant_id}] is currently not active!"
        )


class ProductNotFoundError(OrderDomainError):
    """Raised when an order item references a product missing from the catalog."""

    def __init__(self, product_id: object, restaurant_id: object) -> None:
        self.product_id = product_id
        self.restaurant_id = restaurant_id
        super().__init__(
            f"Product with id [{product_id}] is not available "
            f"at restaurant [{restaurant_id}]!"
        )


class NotFoundError(DomainError):
    """Raised when an aggregate or resource is not found."""


class EntityNotFoundError(NotFoundError):
    """Raised when a specific entity cannot be found by ID."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id={entity_id!r} not found")


class ConcurrencyError(OrderingSagaError):
    """Base class for all concurrency-related conflicts."""


class InfrastructureError(OrderingSagaError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""


class OptimisticLockingError(ConcurrencyError, PersistenceError):
    """Raised when the persistence layer detects a version mismatch.

    Two concurrent saga steps loaded the same aggregate; the second save
    loses and must reload before retrying.
    """

    def __init__(
        self, entity_type: str, entity_id: object, expected: int, actual: int
    ) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{entity_type} with id={entity_id!r} was modified concurrently "
            f"(expected version {expected}, found {actual})"
        )


class MessagingError(InfrastructureError):
    """Base class for all messaging-related infrastructure errors."""


class MessagingSerializationError(MessagingError):
    """Raised when message serialization or deserialization fails."""