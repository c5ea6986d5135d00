"""EnumService — list, look up, and convert classification constants."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from cpcommon.enums.classification import Classification
from cpcommon.enums.constant import TypedConstant
from cpcommon.enums.converter import convert
from cpcommon.enums.lookup import LOOKUP_STRATEGIES, LookupStrategy
from cpcommon.enums.ordering import SORT_KEYS
from cpcommon.errors import ConfigurationError, ConversionError, InvalidArgumentError
from cpcommon.services.result import ServiceResult

logger = logging.getLogger(__name__)

UNKNOWN_CLASSIFICATION = "UNKNOWN_CLASSIFICATION"
INVALID_ARGUMENT = "INVALID_ARGUMENT"
NOT_FOUND = "NOT_FOUND"
CONVERSION_FAILED = "CONVERSION_FAILED"
CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class EnumService:
    """Query operations over a catalog of classifications.

    Args:
        classifications: Catalog keyed by classification name. Defaults to
            the built-in :data:`CLASSIFICATION_REGISTRY`.
    """

    def __init__(
        self,
        classifications: Mapping[str, Classification[TypedConstant]] | None = None,
    ) -> None:
        if classifications is None:
            from cpcommon.enums.builtin import CLASSIFICATION_REGISTRY

            classifications = CLASSIFICATION_REGISTRY
        self._classifications = classifications

    def _find(self, name: str) -> Classification[TypedConstant] | None:
        wanted = name.strip().lower()
        for registered_name, classification in self._classifications.items():
            if registered_name.lower() == wanted:
                return classification
        return None

    def _unknown(self, op: str, name: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            UNKNOWN_CLASSIFICATION,
            f"No classification named {name!r}",
            available=sorted(self._classifications),
        )

    def list_classifications(self) -> ServiceResult:
        op = "list_classifications"
        items: list[dict[str, Any]] = []
        try:
            for name in sorted(self._classifications):
                classification = self._classifications[name]
                items.append(
                    {
                        "name": name,
                        "type": classification.constant_type.__name__,
                        "count": len(classification),
                        "factory_key": classification.factory_key,
                    }
                )
        except ConfigurationError as exc:
            return ServiceResult.failure(op, CONFIGURATION_ERROR, str(exc))
        return ServiceResult.success(op, classifications=items, count=len(items))

    def list_constants(self, name: str, *, sort_by: str = "sequence") -> ServiceResult:
        op = "list_constants"
        classification = self._find(name)
        if classification is None:
            return self._unknown(op, name)

        key = SORT_KEYS.get(sort_by)
        if key is None:
            return ServiceResult.failure(
                op, INVALID_ARGUMENT, f"Unknown sort key {sort_by!r}", allowed=sorted(SORT_KEYS)
            )

        try:
            constants = classification.sorted(key)
        except ConfigurationError as exc:
            return ServiceResult.failure(op, CONFIGURATION_ERROR, str(exc))
        return ServiceResult.success(
            op,
            classification=classification.name,
            constants=[c.to_dict() for c in constants],
            count=len(constants),
        )

    def lookup(self, name: str, value: str, *, by: str = "code") -> ServiceResult:
        op = "lookup"
        classification = self._find(name)
        if classification is None:
            return self._unknown(op, name)

        strategy_cls = LOOKUP_STRATEGIES.get(by)
        if strategy_cls is None:
            return ServiceResult.failure(
                op, INVALID_ARGUMENT, f"Unknown lookup field {by!r}", allowed=sorted(LOOKUP_STRATEGIES)
            )

        try:
            search_value: Any = int(value) if by == "id" else value
            strategy: LookupStrategy = strategy_cls(search_value)
        except (ValueError, InvalidArgumentError) as exc:
            return ServiceResult.failure(op, INVALID_ARGUMENT, str(exc), value=value, by=by)

        try:
            constant = classification.lookup(strategy)
        except ConfigurationError as exc:
            return ServiceResult.failure(op, CONFIGURATION_ERROR, str(exc))
        except InvalidArgumentError as exc:
            logger.debug("Lookup miss: %s", exc)
            return ServiceResult.failure(op, NOT_FOUND, str(exc), value=value, by=by)

        return ServiceResult.success(
            op, classification=classification.name, constant=constant.to_dict()
        )

    def convert(self, name: str, value: str) -> ServiceResult:
        op = "convert"
        classification = self._find(name)
        if classification is None:
            return self._unknown(op, name)

        try:
            constant = convert(classification, value)
        except ConfigurationError as exc:
            return ServiceResult.failure(op, CONFIGURATION_ERROR, str(exc))
        except ConversionError as exc:
            return ServiceResult.failure(op, CONVERSION_FAILED, str(exc), value=value)

        return ServiceResult.success(
            op,
            classification=classification.name,
            constant=constant.to_dict() if constant is not None else None,
        )
