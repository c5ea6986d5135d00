"""Sort keys for typed constants.

Use with ``sorted()`` or :meth:`Classification.sorted`. Constants whose
field is None sort after the ones that carry a value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cpcommon.enums.constant import TypedConstant

SortKey = Callable[[TypedConstant], tuple[bool, Any]]


def _nulls_last(field_name: str) -> SortKey:
    def key(constant: TypedConstant) -> tuple[bool, Any]:
        value = getattr(constant, field_name)
        return (value is None, value if value is not None else 0)

    key.__name__ = f"by_{field_name}"
    return key


by_id = _nulls_last("id")
by_code = _nulls_last("code")
by_description = _nulls_last("description")
by_external_code = _nulls_last("external_code")
by_sequence = _nulls_last("sequence")

SORT_KEYS: dict[str, SortKey] = {
    "id": by_id,
    "code": by_code,
    "description": by_description,
    "external-code": by_external_code,
    "sequence": by_sequence,
}
