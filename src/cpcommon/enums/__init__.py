"""Typed-constant framework — constants, lookups, factories, classifications.

This layer depends only on the stdlib and cpcommon.errors at import time.
The property source is imported lazily, on first factory resolution.
"""

from cpcommon.enums.classification import Classification
from cpcommon.enums.constant import TypedConstant
from cpcommon.enums.converter import convert
from cpcommon.enums.factory import ClassificationFactory, SequentialFactory
from cpcommon.enums.lookup import (
    CodeLookup,
    DescriptionLookup,
    ExternalCodeLookup,
    IdLookup,
    LookupStrategy,
)
from cpcommon.enums.resolution import load_factory, register_factory, resolve_factory

__all__ = [
    "Classification",
    "ClassificationFactory",
    "CodeLookup",
    "DescriptionLookup",
    "ExternalCodeLookup",
    "IdLookup",
    "LookupStrategy",
    "SequentialFactory",
    "TypedConstant",
    "convert",
    "load_factory",
    "register_factory",
    "resolve_factory",
]
