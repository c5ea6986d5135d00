"""TypedConstant — one immutable member of a classification.

A classification (Gender, Continent, ...) subclasses TypedConstant once and
creates its members through a ClassificationFactory.

INVARIANT: ``id``, ``code`` and ``description`` are never None.
INVARIANT: Equality and hashing cover ``id``, ``code``, ``description`` and
``external_code`` only. ``sequence`` records creation order, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cpcommon.errors import InvalidArgumentError


@dataclass(frozen=True)
class TypedConstant:
    """Base value type for all enumerated-type classifications.

    Attributes:
        id: Unique identifier within the classification, assigned by its factory.
        code: Primary lookup key.
        description: Human-readable label.
        external_code: Optional secondary lookup key (e.g. an ISO code).
        sequence: Optional creation order within the classification.
    """

    id: int
    code: str
    description: str
    external_code: str | None = None
    sequence: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidArgumentError("The enum's id cannot be None!")
        if self.code is None:
            raise InvalidArgumentError("The enum's code cannot be None!")
        if self.description is None:
            raise InvalidArgumentError("The enum's description cannot be None!")

    @property
    def classification_name(self) -> str:
        """Name of the concrete classification type (e.g. ``'Gender'``)."""
        return type(self).__name__

    def to_dict(self) -> dict[str, object]:
        """Plain-dict view used by the service layer and JSON output."""
        return {
            "id": self.id,
            "code": self.code,
            "description": self.description,
            "external_code": self.external_code,
            "sequence": self.sequence,
        }

    def __str__(self) -> str:
        return (
            f"{{id = {self.id}, code = {self.code}, description = {self.description}, "
            f"external_code = {self.external_code}, sequence = {self.sequence}}}"
            f":{type(self).__module__}.{type(self).__qualname__}"
        )
