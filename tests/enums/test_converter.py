"""Tests for value -> constant conversion."""

from __future__ import annotations

import logging

import pytest

from cpcommon.config.properties import PropertyManager
from cpcommon.enums.classification import Classification
from cpcommon.enums.constant import TypedConstant
from cpcommon.enums.converter import convert
from cpcommon.errors import ConversionError, InvalidArgumentError


class Size(TypedConstant):
    pass


@pytest.fixture
def sizes() -> Classification[Size]:
    return Classification(
        "Size",
        Size,
        source=PropertyManager(),
        members={
            "SMALL": ("small", "Small", "S"),
            "MEDIUM": ("medium", "Medium", "M"),
            "LARGE": ("large", "Large", "L"),
        },
    )


class TestConvert:
    def test_none(self, sizes: Classification[Size]) -> None:
        assert convert(sizes, None) is None

    def test_constant_passthrough(self, sizes: Classification[Size]) -> None:
        assert convert(sizes, sizes.LARGE) is sizes.LARGE

    def test_int_is_id(self, sizes: Classification[Size]) -> None:
        assert convert(sizes, 1) is sizes.MEDIUM

    def test_digit_string_is_id(self, sizes: Classification[Size]) -> None:
        assert convert(sizes, " 2 ") is sizes.LARGE

    def test_code(self, sizes: Classification[Size]) -> None:
        assert convert(sizes, "small") is sizes.SMALL

    def test_external_code_fallback(
        self, sizes: Classification[Size], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="cpcommon.enums.converter"):
            assert convert(sizes, "M") is sizes.MEDIUM
        assert "trying external code" in caplog.text

    @pytest.mark.parametrize("value", ["huge", "9", 9, "", "   "])
    def test_miss(self, sizes: Classification[Size], value: object) -> None:
        with pytest.raises(ConversionError) as exc_info:
            convert(sizes, value)
        assert isinstance(exc_info.value.__cause__, InvalidArgumentError)

    @pytest.mark.parametrize("value", [True, 1.5, ["small"]])
    def test_unsupported_type(self, sizes: Classification[Size], value: object) -> None:
        with pytest.raises(ConversionError, match="Unable to determine"):
            convert(sizes, value)

    def test_conversion_error_is_invalid_argument(self, sizes: Classification[Size]) -> None:
        with pytest.raises(InvalidArgumentError):
            convert(sizes, "huge")
