import logging

import pytest

from cqrs_ddd_rules import TypeHandlerRegistry
from cqrs_ddd_rules.exceptions import HandlerNotFoundError, RegistrySealedError


class Animal:
    pass


class Dog(Animal):
    pass


class Order:
    pass


def handle_animal(value, ctx) -> None:
    pass


def handle_dog(value, ctx) -> None:
    pass


def test_resolve_by_exact_type(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="cqrs_ddd_rules.handlers")
    registry = TypeHandlerRegistry()

    registry.register(Animal, handle_animal)

    assert registry.resolve(Animal()) is handle_animal
    assert registry.get(Animal) is handle_animal
    assert Animal in registry
    assert "Registered type handler Animal" in caplog.text


def test_subclass_is_not_matched() -> None:
    registry = TypeHandlerRegistry()
    registry.register(Animal, handle_animal)

    with pytest.raises(HandlerNotFoundError, match="'Dog' has not been registered"):
        registry.resolve(Dog())


def test_superclass_is_not_matched() -> None:
    registry = TypeHandlerRegistry()
    registry.register(Dog, handle_dog)

    with pytest.raises(HandlerNotFoundError):
        registry.resolve(Animal())


def test_builtin_types_dispatch_exactly() -> None:
    registry = TypeHandlerRegistry()
    registry.register(int, handle_animal)

    assert registry.resolve(5) is handle_animal
    # bool subclasses int but is a different type
    with pytest.raises(HandlerNotFoundError):
        registry.resolve(True)


def test_reregistering_replaces_handler() -> None:
    registry = TypeHandlerRegistry()
    registry.register(Animal, handle_animal)
    registry.register(Animal, handle_dog)

    assert registry.resolve(Animal()) is handle_dog
    assert len(registry) == 1


def test_handles_decorator() -> None:
    registry = TypeHandlerRegistry()

    @registry.handles(Order)
    def validate_order(order, ctx) -> None:
        pass

    assert registry.resolve(Order()) is validate_order
    assert registry.types == [Order]


def test_register_requires_a_class() -> None:
    registry = TypeHandlerRegistry()

    with pytest.raises(TypeError, match="Expected a class"):
        registry.register(Order(), handle_animal)  # type: ignore[arg-type]


def test_sealed_registry_rejects_registration() -> None:
    registry = TypeHandlerRegistry()
    registry.register(Animal, handle_animal)
    registry.seal()

    with pytest.raises(RegistrySealedError, match="TypeHandlerRegistry is sealed"):
        registry.register(Dog, handle_dog)
    assert registry.resolve(Animal()) is handle_animal


def test_missing_handler_error_to_dict() -> None:
    registry = TypeHandlerRegistry()
    registry.register(Animal, handle_animal)

    with pytest.raises(HandlerNotFoundError) as exc_info:
        registry.resolve(Order())

    data = exc_info.value.to_dict()
    assert data["error"] == "HANDLER_NOT_FOUND"
    assert data["type"] == "Order"
    assert data["registered_types"] == ["Animal"]
