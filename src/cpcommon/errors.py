"""Exception hierarchy for cp-common.

All exceptions are rooted at CommonError so callers can catch broadly
(``except CommonError``) or narrowly (``except ConfigurationError``).

Two families:
  InvalidArgumentError  → bad input: missing constant fields, empty lookup
                          values, lookup misses, duplicate registrations
  ConfigurationError    → factory resolution failed; the original cause is
                          always chained (``__cause__``)
"""

from __future__ import annotations


class CommonError(Exception):
    """Base exception for all cp-common errors."""


class InvalidArgumentError(CommonError, ValueError):
    """Raised when an argument is missing or does not identify a constant."""


class DuplicateConstantError(InvalidArgumentError):
    """Raised when a constant's id or code is already registered in its classification."""


class ConversionError(InvalidArgumentError):
    """Raised when a value cannot be converted into a constant of a classification."""


class ConfigurationError(CommonError):
    """Raised when required configuration is missing or invalid."""


class PropertyNotFoundError(ConfigurationError):
    """Raised when a key is absent from a property source."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Property ({key}) not found!")
        self.key = key
