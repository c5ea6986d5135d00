"""Factory resolution — turn a property key into a ClassificationFactory.

The configured value names the factory either by a short name registered
in :data:`FACTORY_REGISTRY` (built-ins and plugin contributions) or by an
import path, ``package.module:Name`` or ``package.module.Name``.

Every failure is logged and re-raised as ConfigurationError with the
original exception chained:

- property key absent from the source
- named factory cannot be imported / found
- target is not a factory class, or cannot be called with zero arguments
- the factory's constructor raised
"""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import TYPE_CHECKING, Any

from cpcommon.enums.factory import ClassificationFactory, SequentialFactory
from cpcommon.errors import ConfigurationError, PropertyNotFoundError

if TYPE_CHECKING:
    from cpcommon.config.properties import PropertySource

logger = logging.getLogger(__name__)

# Populated by _register_factories() at module load time and by plugins.
FACTORY_REGISTRY: dict[str, type[ClassificationFactory]] = {}

_BUILTIN_FACTORIES: dict[str, type[ClassificationFactory]] = {
    "sequential": SequentialFactory,
}


def register_factory(name: str, factory_cls: type[ClassificationFactory]) -> None:
    """Register *factory_cls* under the short *name*.

    Built-in names are reserved and cannot be overridden.
    """
    if not isinstance(name, str):
        msg = f"Factory name {name!r} must be a string"
        raise TypeError(msg)
    normalized_name = name.strip()
    if not normalized_name:
        msg = "Factory name must not be empty"
        raise ValueError(msg)

    if not (isinstance(factory_cls, type) and issubclass(factory_cls, ClassificationFactory)):
        msg = f"Factory {normalized_name!r} must extend ClassificationFactory"
        raise TypeError(msg)

    builtin = _BUILTIN_FACTORIES.get(normalized_name)
    if builtin is not None and builtin is not factory_cls:
        msg = f"Factory {normalized_name!r} conflicts with a built-in registration"
        raise ValueError(msg)

    FACTORY_REGISTRY[normalized_name] = factory_cls


def resolve_factory(key: str, source: PropertySource) -> ClassificationFactory:
    """Look up *key* in *source* and instantiate the factory it names.

    Raises:
        ConfigurationError: On any failure; the cause is chained.
    """
    logger.debug("factory property key (%s)", key)
    try:
        factory_name = source.get_string_value(key)
    except PropertyNotFoundError as exc:
        logger.error(
            "Failed to determine enum factory for property key (%s)", key, exc_info=True
        )
        msg = f"Failed to determine enum factory for property key ({key}) in the configuration!"
        raise ConfigurationError(msg) from exc
    return load_factory(factory_name, key=key)


def load_factory(factory_name: str, *, key: str | None = None) -> ClassificationFactory:
    """Instantiate the factory named *factory_name* with zero arguments."""
    logger.debug("factory name (%s) for key (%s)", factory_name, key)

    target: Any = FACTORY_REGISTRY.get(factory_name.strip())
    if target is None:
        try:
            target = _import_target(factory_name)
        except Exception as exc:
            logger.error("Unable to find enum factory (%s)", factory_name, exc_info=True)
            msg = f"Unable to find enum factory ({factory_name})!"
            raise ConfigurationError(msg) from exc

    if not (isinstance(target, type) and issubclass(target, ClassificationFactory)):
        cause = TypeError(f"{target!r} is not a ClassificationFactory class")
        logger.error("Enum factory (%s) is not a factory class", factory_name)
        msg = f"No usable zero-argument constructor in enum factory ({factory_name})!"
        raise ConfigurationError(msg) from cause

    try:
        if inspect.isabstract(target):
            raise TypeError(f"{target.__qualname__} is abstract")
        inspect.signature(target).bind()
    except TypeError as exc:
        logger.error(
            "No usable zero-argument constructor in enum factory (%s)",
            factory_name,
            exc_info=True,
        )
        msg = f"No usable zero-argument constructor in enum factory ({factory_name})!"
        raise ConfigurationError(msg) from exc

    try:
        return target()
    except Exception as exc:
        logger.error("Construction of enum factory (%s) failed", factory_name, exc_info=True)
        msg = f"Construction of enum factory ({factory_name}) failed!"
        raise ConfigurationError(msg) from exc


def _import_target(path: str) -> Any:
    """Import ``package.module:Name`` or ``package.module.Name``."""
    path = path.strip()
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        msg = f"Invalid factory path {path!r}; expected 'package.module:Name'"
        raise ValueError(msg)

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj


def _register_factories() -> None:
    """Populate :data:`FACTORY_REGISTRY` with built-in factories."""
    for name, factory_cls in _BUILTIN_FACTORIES.items():
        register_factory(name, factory_cls)


_register_factories()
