"""Shared pytest fixtures for cp-common tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from click.testing import CliRunner

from cpcommon.config.properties import (
    PropertyManager,
    reset_property_manager,
    set_property_manager,
)
from cpcommon.enums.classification import Classification
from cpcommon.enums.constant import TypedConstant
from cpcommon.enums.resolution import FACTORY_REGISTRY


class Sample(TypedConstant):
    """Throwaway classification type for tests."""


@pytest.fixture(autouse=True)
def _isolated_properties() -> Generator[None]:
    """Give every test an empty process-wide PropertyManager."""
    set_property_manager(PropertyManager())
    yield
    reset_property_manager()


@pytest.fixture(autouse=True)
def _restore_factory_registry() -> Generator[None]:
    """Drop factories registered by a test."""
    saved = dict(FACTORY_REGISTRY)
    yield
    FACTORY_REGISTRY.clear()
    FACTORY_REGISTRY.update(saved)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample() -> Classification[Sample]:
    """Empty classification with the default sequential factory."""
    return Classification("Sample", Sample, source=PropertyManager())


@pytest.fixture
def gender_like() -> Classification[Sample]:
    """Two-member classification created through its factory."""
    classification = Classification("Gender", Sample, source=PropertyManager())
    classification.create("female", "Female", "F")
    classification.create("male", "Male", "M")
    return classification
