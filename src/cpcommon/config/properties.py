"""PropertyManager — string key/value lookups for the rest of the library.

Factory resolution depends on a single operation of its property source,
``get_string_value(key)``, which raises PropertyNotFoundError when the
key is absent. PropertyManager implements it over any string mapping,
and adds a few typed conveniences.

The process-wide instance is built from :class:`CommonSettings` on first
use; :func:`set_property_manager` replaces it at the composition root.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from cpcommon.errors import ConfigurationError, PropertyNotFoundError

if TYPE_CHECKING:
    from cpcommon.config.settings import CommonSettings

_MISSING: Any = object()

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0"})


class PropertySource(Protocol):
    """Anything that can answer ``get_string_value(key)``."""

    def get_string_value(self, key: str) -> str: ...


class PropertyManager:
    """Read-only property lookups over a string mapping."""

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        self._properties: dict[str, str] = dict(properties or {})

    @classmethod
    def from_settings(cls, settings: CommonSettings) -> PropertyManager:
        return cls(settings.properties)

    def has_property(self, key: str) -> bool:
        return key in self._properties

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def keys(self) -> list[str]:
        return list(self._properties)

    def get_string_value(self, key: str, default: Any = _MISSING) -> str:
        """Return the value for *key*.

        Raises:
            PropertyNotFoundError: If *key* is absent and no *default* is given.
        """
        try:
            return self._properties[key]
        except KeyError:
            if default is not _MISSING:
                return default
            raise PropertyNotFoundError(key) from None

    def get_int_value(self, key: str, default: Any = _MISSING) -> int:
        if key not in self._properties and default is not _MISSING:
            return default
        raw = self.get_string_value(key)
        try:
            return int(raw.strip())
        except ValueError as exc:
            msg = f"Property ({key}) value ({raw}) is not an integer!"
            raise ConfigurationError(msg) from exc

    def get_bool_value(self, key: str, default: Any = _MISSING) -> bool:
        if key not in self._properties and default is not _MISSING:
            return default
        raw = self.get_string_value(key)
        normalized = raw.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        msg = f"Property ({key}) value ({raw}) is not a boolean!"
        raise ConfigurationError(msg)


_lock = threading.Lock()
_instance: PropertyManager | None = None


def get_property_manager() -> PropertyManager:
    """Return the process-wide PropertyManager, building it on first call."""
    global _instance
    with _lock:
        if _instance is None:
            from cpcommon.config.settings import CommonSettings

            _instance = PropertyManager.from_settings(CommonSettings.load())
        return _instance


def set_property_manager(manager: PropertyManager) -> None:
    """Install *manager* as the process-wide PropertyManager."""
    global _instance
    with _lock:
        _instance = manager


def reset_property_manager() -> None:
    """Forget the process-wide PropertyManager (the next call rebuilds it)."""
    global _instance
    with _lock:
        _instance = None
