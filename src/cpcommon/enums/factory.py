"""Classification factories — build constants and register them.

A factory is bound to exactly one Classification. ``create_instance``
builds the constant and then registers it with the bound classification,
so every constant a factory creates is discoverable by lookup. Building
without registering is available separately through ``build``.

Factories must be constructible with zero arguments so that they can be
named in configuration (see :mod:`cpcommon.enums.resolution`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cpcommon.errors import ConfigurationError

if TYPE_CHECKING:
    from cpcommon.enums.classification import Classification
    from cpcommon.enums.constant import TypedConstant


class ClassificationFactory(ABC):
    """Abstract creator of constants for one classification."""

    def __init__(self) -> None:
        self._classification: Classification | None = None

    @property
    def classification(self) -> Classification:
        """The classification this factory creates constants for."""
        if self._classification is None:
            raise ConfigurationError(f"{type(self).__name__} is not bound to a classification!")
        return self._classification

    @property
    def is_bound(self) -> bool:
        return self._classification is not None

    def bind(self, classification: Classification) -> None:
        """Attach this factory to *classification*.

        Raises:
            ConfigurationError: If already bound to a different classification.
        """
        if self._classification is not None and self._classification is not classification:
            raise ConfigurationError(
                f"{type(self).__name__} is already bound to classification "
                f"({self._classification.name}); cannot rebind to ({classification.name})!"
            )
        self._classification = classification

    @abstractmethod
    def create_instance(
        self,
        code: str,
        description: str,
        external_code: str | None = None,
    ) -> TypedConstant:
        """Create, register and return a new constant."""
        ...


class SequentialFactory(ClassificationFactory):
    """Default factory: ids and sequence numbers count up from 0.

    Each call consumes the next number, whether or not construction
    succeeds. The counter is never reset. Calls must be serialized by the
    caller; Classification does so under its own lock.
    """

    def __init__(self) -> None:
        super().__init__()
        self._sequence = 0

    def next_sequence(self) -> int:
        sequence = self._sequence
        self._sequence += 1
        return sequence

    def build(
        self,
        code: str,
        description: str,
        external_code: str | None = None,
    ) -> TypedConstant:
        """Construct a constant without registering it."""
        sequence = self.next_sequence()
        constant_type = self.classification.constant_type
        return constant_type(
            id=sequence,
            code=code,
            description=description,
            external_code=external_code,
            sequence=sequence,
        )

    def create_instance(
        self,
        code: str,
        description: str,
        external_code: str | None = None,
    ) -> TypedConstant:
        constant = self.build(code, description, external_code)
        return self.classification.register(constant)
