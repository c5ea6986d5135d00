"""Lookup strategies — predicates that find a constant by one field.

Each strategy is built from exactly one search value and exposes:

- ``accept(candidate)``: True iff the candidate's field equals the value.
- ``lookup_value``: the original search value, for the miss diagnostic.
- ``argument_label``: the human-readable field name, for the same diagnostic.

String strategies reject None and ``""``; the id strategy rejects None.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from cpcommon.enums.constant import TypedConstant
from cpcommon.errors import InvalidArgumentError


class LookupStrategy(ABC):
    """Abstract predicate over a classification's constants."""

    @abstractmethod
    def accept(self, candidate: TypedConstant) -> bool:
        """Return True if *candidate* matches the search value."""
        ...

    @property
    @abstractmethod
    def lookup_value(self) -> Any:
        """The value being searched for."""
        ...

    @property
    @abstractmethod
    def argument_label(self) -> str:
        """Name of the matched field (e.g. ``'code'``, ``'ID'``)."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.lookup_value!r})"


class _FieldLookup(LookupStrategy):
    """Equality match against a single TypedConstant attribute."""

    field_name: ClassVar[str]
    label: ClassVar[str]

    def __init__(self, value: Any) -> None:
        self._validate(value)
        self._value = value

    def _validate(self, value: Any) -> None:
        if value is None or value == "":
            raise InvalidArgumentError(f"The {self.label} for the lookup strategy cannot be empty!")

    def accept(self, candidate: TypedConstant) -> bool:
        return getattr(candidate, self.field_name) == self._value

    @property
    def lookup_value(self) -> Any:
        return self._value

    @property
    def argument_label(self) -> str:
        return self.label


class CodeLookup(_FieldLookup):
    field_name = "code"
    label = "code"


class DescriptionLookup(_FieldLookup):
    field_name = "description"
    label = "description"


class ExternalCodeLookup(_FieldLookup):
    field_name = "external_code"
    label = "external code"


class IdLookup(_FieldLookup):
    field_name = "id"
    label = "ID"

    def _validate(self, value: Any) -> None:
        if value is None:
            raise InvalidArgumentError("The ID for the lookup strategy cannot be None!")


LOOKUP_STRATEGIES: dict[str, type[LookupStrategy]] = {
    "id": IdLookup,
    "code": CodeLookup,
    "description": DescriptionLookup,
    "external-code": ExternalCodeLookup,
}
