"""Tests for ClassificationFactory binding and SequentialFactory numbering."""

from __future__ import annotations

import pytest

from cpcommon.config.properties import PropertyManager
from cpcommon.enums.classification import Classification
from cpcommon.enums.constant import TypedConstant
from cpcommon.enums.factory import ClassificationFactory, SequentialFactory
from cpcommon.errors import ConfigurationError, InvalidArgumentError


class Fruit(TypedConstant):
    pass


def _fruits(**kwargs: object) -> Classification[Fruit]:
    return Classification("Fruit", Fruit, source=PropertyManager(), **kwargs)  # type: ignore[arg-type]


class TestSequentialFactory:
    def test_sequence_starts_at_zero_and_increases(self) -> None:
        fruits = _fruits()
        created = [fruits.create(code, code.title()) for code in ("apple", "banana", "cherry")]
        assert [c.sequence for c in created] == [0, 1, 2]
        assert [c.id for c in created] == [0, 1, 2]

    def test_create_registers(self) -> None:
        fruits = _fruits()
        apple = fruits.create("apple", "Apple", "APL")
        assert apple in fruits
        assert fruits.get_by_external_code("APL") is apple

    def test_constant_has_classification_type(self) -> None:
        fruits = _fruits()
        assert type(fruits.create("apple", "Apple")) is Fruit

    def test_build_does_not_register(self) -> None:
        factory = SequentialFactory()
        fruits = _fruits(factory=factory)
        pear = factory.build("pear", "Pear")
        assert pear.code == "pear"
        assert len(fruits) == 0

    def test_failed_construction_consumes_sequence(self) -> None:
        fruits = _fruits()
        with pytest.raises(InvalidArgumentError):
            fruits.create(None, "Nothing")  # type: ignore[arg-type]
        assert fruits.create("apple", "Apple").sequence == 1

    def test_unbound_factory(self) -> None:
        factory = SequentialFactory()
        assert factory.is_bound is False
        with pytest.raises(ConfigurationError, match="not bound"):
            factory.create_instance("apple", "Apple")


class TestBinding:
    def test_rebinding_to_other_classification_fails(self) -> None:
        factory = SequentialFactory()
        _fruits(factory=factory)
        with pytest.raises(ConfigurationError, match="already bound"):
            Classification("Other", Fruit, factory=factory)

    def test_rebinding_same_classification_is_noop(self) -> None:
        factory = SequentialFactory()
        fruits = _fruits(factory=factory)
        factory.bind(fruits)
        assert factory.classification is fruits

    def test_abstract_factory_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            ClassificationFactory()  # type: ignore[abstract]


class TestCustomFactory:
    def test_custom_numbering(self) -> None:
        class HundredsFactory(ClassificationFactory):
            def __init__(self) -> None:
                super().__init__()
                self._next = 100

            def create_instance(self, code, description, external_code=None):
                constant = self.classification.constant_type(
                    id=self._next, code=code, description=description, external_code=external_code
                )
                self._next += 100
                return self.classification.register(constant)

        fruits = _fruits(factory=HundredsFactory())
        fruits.create("apple", "Apple")
        fruits.create("banana", "Banana")
        assert fruits.get_by_id(200).code == "banana"
