"""Convert loosely typed values (form input, config, JSON) into constants."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from cpcommon.enums.constant import TypedConstant
from cpcommon.errors import ConversionError, InvalidArgumentError

if TYPE_CHECKING:
    from cpcommon.enums.classification import Classification

C = TypeVar("C", bound=TypedConstant)

logger = logging.getLogger(__name__)


def convert(classification: Classification[C], value: object) -> C | None:
    """Convert *value* into a constant of *classification*.

    - ``None`` converts to ``None``.
    - A constant of the classification's type is returned unchanged.
    - An ``int``, or a string of digits, is looked up by id.
    - Any other string is looked up by code, then by external code.

    Raises:
        ConversionError: If *value* has an unsupported type or matches nothing.
    """
    if value is None:
        return None

    if isinstance(value, classification.constant_type):
        return value

    try:
        if isinstance(value, int) and not isinstance(value, bool):
            return classification.get_by_id(value)

        if isinstance(value, str):
            text = value.strip()
            if text.isdecimal():
                return classification.get_by_id(int(text))
            try:
                return classification.get_by_code(text)
            except InvalidArgumentError as exc:
                logger.debug("%s; trying external code", exc)
                return classification.get_by_external_code(text)
    except InvalidArgumentError as exc:
        msg = f"({value}) is not a valid value for the {classification.name} enumerated-type!"
        raise ConversionError(msg) from exc

    logger.warning(
        "Unable to determine %s for value (%r) of type %s",
        classification.name,
        value,
        type(value).__name__,
    )
    msg = f"Unable to determine {classification.name} for value ({value!r})!"
    raise ConversionError(msg)
