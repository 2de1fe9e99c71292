from pytest_archon import archrule


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from any other layer of the package.
    """
    (
        archrule("primitives_isolation")
        .match("food_ordering_saga.primitives*")
        .should_not_import("food_ordering_saga.domain*")
        .should_not_import("food_ordering_saga.order*")
        .should_not_import("food_ordering_saga.payment*")
        .should_not_import("food_ordering_saga.messaging*")
        .should_not_import("food_ordering_saga.application*")
        .check("food_ordering_saga")
    )


def test_saga_decisions_are_pure() -> None:
    """
    Domain, order and payment decide saga steps only.
    They must not reach transports, persistence, orchestration or logging setup.
    """
    (
        archrule("saga_decisions_are_pure")
        .match("food_ordering_saga.domain*")
        .match("food_ordering_saga.order*")
        .match("food_ordering_saga.payment*")
        .should_not_import("food_ordering_saga.messaging*")
        .should_not_import("food_ordering_saga.adapters*")
        .should_not_import("food_ordering_saga.application*")
        .should_not_import("food_ordering_saga.observability*")
        .should_not_import("aiokafka*")
        .check("food_ordering_saga")
    )


def test_order_and_payment_are_independent() -> None:
    """
    The two saga legs only meet through messages.
    """
    (
        archrule("order_without_payment")
        .match("food_ordering_saga.order*")
        .should_not_import("food_ordering_saga.payment*")
        .check("food_ordering_saga")
    )
    (
        archrule("payment_without_order")
        .match("food_ordering_saga.payment*")
        .should_not_import("food_ordering_saga.order*")
        .check("food_ordering_saga")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on Adapters (implementations).
    """
    (
        archrule("ports_layering")
        .match("food_ordering_saga.ports*")
        .should_not_import("food_ordering_saga.adapters*")
        .should_not_import("food_ordering_saga.messaging*")
        .check("food_ordering_saga")
    )


def test_messaging_layering() -> None:
    """
    Messaging carries events; it must not know who orchestrates them.
    """
    (
        archrule("messaging_layering")
        .match("food_ordering_saga.messaging*")
        .should_not_import("food_ordering_saga.application*")
        .should_not_import("food_ordering_saga.adapters*")
        .check("food_ordering_saga")
    )
