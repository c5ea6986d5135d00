"""Tests for EnumService over a throwaway catalog and the built-ins."""

from __future__ import annotations

import pytest

from cpcommon.config.properties import PropertyManager
from cpcommon.enums.classification import Classification
from cpcommon.enums.constant import TypedConstant
from cpcommon.services.enums import (
    CONFIGURATION_ERROR,
    CONVERSION_FAILED,
    INVALID_ARGUMENT,
    NOT_FOUND,
    UNKNOWN_CLASSIFICATION,
    EnumService,
)


@pytest.fixture
def service(gender_like: Classification[TypedConstant]) -> EnumService:
    return EnumService({"Gender": gender_like})


class TestListClassifications:
    def test_lists_catalog(self, service: EnumService) -> None:
        result = service.list_classifications()
        assert result.ok
        assert result.data["count"] == 1
        item = result.data["classifications"][0]
        assert item == {"name": "Gender", "type": "Sample", "count": 2, "factory_key": None}

    def test_default_catalog_is_builtin(self) -> None:
        names = [c["name"] for c in EnumService().list_classifications().data["classifications"]]
        assert "Gender" in names
        assert "Relationship" in names

    def test_bad_factory_is_configuration_error(
        self, gender_like: Classification[TypedConstant]
    ) -> None:
        broken = Classification(
            "Broken",
            gender_like.constant_type,
            members={"ONE": ("one", "One")},
            factory_key="broken.factory",
            source=PropertyManager({"broken.factory": "no.such.module:Factory"}),
        )
        result = EnumService({"Broken": broken}).list_classifications()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == CONFIGURATION_ERROR


class TestListConstants:
    def test_default_sequence_order(self, service: EnumService) -> None:
        result = service.list_constants("gender")
        assert result.ok
        assert result.data["classification"] == "Gender"
        assert [c["code"] for c in result.data["constants"]] == ["female", "male"]

    def test_sort_by_external_code(self, service: EnumService) -> None:
        result = service.list_constants("Gender", sort_by="external-code")
        assert [c["external_code"] for c in result.data["constants"]] == ["F", "M"]

    def test_unknown_sort_key(self, service: EnumService) -> None:
        result = service.list_constants("Gender", sort_by="colour")
        assert result.error is not None
        assert result.error.code == INVALID_ARGUMENT
        assert "sequence" in result.error.detail["allowed"]

    def test_unknown_classification(self, service: EnumService) -> None:
        result = service.list_constants("Planet")
        assert result.error is not None
        assert result.error.code == UNKNOWN_CLASSIFICATION
        assert result.error.detail["available"] == ["Gender"]


class TestLookup:
    def test_by_code(self, service: EnumService) -> None:
        result = service.lookup("Gender", "male")
        assert result.ok
        assert result.data["constant"]["id"] == 1

    def test_by_id(self, service: EnumService) -> None:
        result = service.lookup("Gender", "0", by="id")
        assert result.data["constant"]["code"] == "female"

    def test_by_external_code(self, service: EnumService) -> None:
        result = service.lookup("Gender", "M", by="external-code")
        assert result.data["constant"]["code"] == "male"

    def test_by_description(self, service: EnumService) -> None:
        result = service.lookup("Gender", "Female", by="description")
        assert result.data["constant"]["code"] == "female"

    def test_miss_is_not_found(self, service: EnumService) -> None:
        result = service.lookup("Gender", "other")
        assert result.error is not None
        assert result.error.code == NOT_FOUND
        assert result.error.message == "(other) is not a valid code for the Gender enumerated-type!"

    def test_non_integer_id(self, service: EnumService) -> None:
        result = service.lookup("Gender", "one", by="id")
        assert result.error is not None
        assert result.error.code == INVALID_ARGUMENT

    def test_empty_code(self, service: EnumService) -> None:
        result = service.lookup("Gender", "")
        assert result.error is not None
        assert result.error.code == INVALID_ARGUMENT

    def test_unknown_field(self, service: EnumService) -> None:
        result = service.lookup("Gender", "male", by="colour")
        assert result.error is not None
        assert result.error.code == INVALID_ARGUMENT


class TestConvert:
    @pytest.mark.parametrize("value,code", [("1", "male"), ("female", "female"), ("F", "female")])
    def test_converts(self, service: EnumService, value: str, code: str) -> None:
        result = service.convert("Gender", value)
        assert result.ok
        assert result.data["constant"]["code"] == code

    def test_failure(self, service: EnumService) -> None:
        result = service.convert("Gender", "X")
        assert result.error is not None
        assert result.error.code == CONVERSION_FAILED
        assert result.error.detail == {"value": "X"}

    def test_unknown_classification(self, service: EnumService) -> None:
        result = service.convert("Planet", "1")
        assert result.error is not None
        assert result.error.code == UNKNOWN_CLASSIFICATION
