"""Classification — the registry and accessor for one family of constants.

A Classification owns:

- its constants, kept in declaration order and indexed by id and code;
- exactly one ClassificationFactory, chosen once and cached.

Declared members are created lazily on first access, once, under the
classification's lock. After that the constant set only grows (through
:meth:`Classification.create`); nothing is ever removed.

Factory selection, first match wins:

1. A factory injected via the constructor or :meth:`use_factory`.
2. The factory named by ``factory_key`` in the property source.
3. ``default_factory()``.

INVARIANT: Lookups never return None. A miss raises InvalidArgumentError.
INVARIANT: Ids and codes are unique within a classification.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from cpcommon.enums.constant import TypedConstant
from cpcommon.enums.factory import ClassificationFactory, SequentialFactory
from cpcommon.enums.lookup import (
    CodeLookup,
    DescriptionLookup,
    ExternalCodeLookup,
    IdLookup,
    LookupStrategy,
)
from cpcommon.enums.ordering import SortKey, by_sequence
from cpcommon.errors import (
    ConfigurationError,
    DuplicateConstantError,
    InvalidArgumentError,
    PropertyNotFoundError,
)

if TYPE_CHECKING:
    from cpcommon.config.properties import PropertySource

C = TypeVar("C", bound=TypedConstant)

logger = logging.getLogger(__name__)

MemberSpec = Sequence[str | None]


class Classification(Generic[C]):
    """A named set of typed constants sharing one factory.

    Args:
        name: Classification name (e.g. ``"Gender"``).
        constant_type: The TypedConstant subclass of every member.
        members: Ordered ``attribute name -> (code, description[, external_code])``
            declarations, created lazily on first access.
        factory: Factory instance to use instead of resolving one.
        factory_key: Property key naming the factory in the property source.
        default_factory: Zero-argument callable used when nothing else applies.
        source: Property source; defaults to the process-wide PropertyManager.
    """

    def __init__(
        self,
        name: str,
        constant_type: type[C],
        *,
        members: Mapping[str, MemberSpec] | None = None,
        factory: ClassificationFactory | None = None,
        factory_key: str | None = None,
        default_factory: Callable[[], ClassificationFactory] = SequentialFactory,
        source: PropertySource | None = None,
    ) -> None:
        self.name = name
        self.constant_type = constant_type
        self.factory_key = factory_key
        self._members: dict[str, MemberSpec] = dict(members or {})
        self._default_factory = default_factory
        self._source = source
        self._lock = threading.RLock()
        self._factory: ClassificationFactory | None = None
        self._constants: list[C] = []
        self._by_id: dict[int, C] = {}
        self._by_code: dict[str, C] = {}
        self._named: dict[str, C] = {}
        self._loaded = False
        self._loading = False
        if factory is not None:
            self.use_factory(factory)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @property
    def factory(self) -> ClassificationFactory:
        """The factory for this classification, resolved once and cached."""
        with self._lock:
            if self._factory is None:
                factory = self._select_factory()
                factory.bind(self)
                self._factory = factory
            return self._factory

    def use_factory(self, factory: ClassificationFactory) -> None:
        """Inject *factory*, bypassing configuration-driven resolution.

        Raises:
            ConfigurationError: If a different factory is already in use.
        """
        with self._lock:
            if self._factory is not None and self._factory is not factory:
                raise ConfigurationError(
                    f"The {self.name} classification already uses factory "
                    f"({type(self._factory).__name__})!"
                )
            factory.bind(self)
            self._factory = factory

    def _select_factory(self) -> ClassificationFactory:
        from cpcommon.enums.resolution import load_factory

        if self.factory_key:
            source = self._source if self._source is not None else _default_source()
            try:
                factory_name = source.get_string_value(self.factory_key)
            except PropertyNotFoundError:
                logger.debug(
                    "No factory configured for %s (%s); using default",
                    self.name,
                    self.factory_key,
                )
            else:
                return load_factory(factory_name, key=self.factory_key)
        return self._default_factory()

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            # Re-entry from the same thread while members are being created.
            if self._loaded or self._loading:
                return
            self._loading = True
            try:
                factory = self.factory
                for member_name, spec in self._members.items():
                    if member_name in self._named:
                        continue
                    self._named[member_name] = factory.create_instance(*spec)
                self._loaded = True
                logger.debug("Loaded %d %s constants", len(self._constants), self.name)
            finally:
                self._loading = False

    def create(
        self,
        code: str,
        description: str,
        external_code: str | None = None,
    ) -> C:
        """Create and register a new constant through this classification's factory."""
        self._ensure_loaded()
        with self._lock:
            return self.factory.create_instance(code, description, external_code)  # type: ignore[return-value]

    def register(self, constant: C) -> C:
        """Add *constant* to this classification.

        Raises:
            InvalidArgumentError: If *constant* is not of this classification's type.
            DuplicateConstantError: If its id or code is already registered.
        """
        if not isinstance(constant, self.constant_type):
            raise InvalidArgumentError(
                f"({constant!r}) is not a {self.constant_type.__name__} constant!"
            )
        with self._lock:
            if constant.id in self._by_id:
                raise DuplicateConstantError(
                    f"ID ({constant.id}) is already registered in the {self.name} classification!"
                )
            if constant.code in self._by_code:
                raise DuplicateConstantError(
                    f"Code ({constant.code}) is already registered in the {self.name} classification!"
                )
            self._constants.append(constant)
            self._by_id[constant.id] = constant
            self._by_code[constant.code] = constant
        return constant

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, strategy: LookupStrategy) -> C:
        """Return the first constant, in declaration order, accepted by *strategy*.

        Raises:
            InvalidArgumentError: If no constant matches.
        """
        self._ensure_loaded()
        for constant in self._constants:
            if strategy.accept(constant):
                return constant
        raise InvalidArgumentError(
            f"({strategy.lookup_value}) is not a valid {strategy.argument_label} "
            f"for the {self.name} enumerated-type!"
        )

    def get_by_id(self, id: int) -> C:
        return self.lookup(IdLookup(id))

    def get_by_code(self, code: str) -> C:
        return self.lookup(CodeLookup(code))

    def get_by_description(self, description: str) -> C:
        return self.lookup(DescriptionLookup(description))

    def get_by_external_code(self, external_code: str) -> C:
        return self.lookup(ExternalCodeLookup(external_code))

    def values(self) -> tuple[C, ...]:
        """All constants in declaration order."""
        self._ensure_loaded()
        return tuple(self._constants)

    def sorted(self, key: SortKey = by_sequence, *, reverse: bool = False) -> list[C]:
        return sorted(self.values(), key=key, reverse=reverse)

    @property
    def member_names(self) -> list[str]:
        return list(self._members)

    def __getattr__(self, name: str) -> Any:
        members = self.__dict__.get("_members", {})
        if name in members:
            self._ensure_loaded()
            constant = self._named.get(name)
            if constant is not None:
                return constant
            raise AttributeError(
                f"Member {name!r} of {self.__dict__.get('name')!r} is not created yet"
            )
        raise AttributeError(
            f"{type(self).__name__} {self.__dict__.get('name')!r} has no member {name!r}"
        )

    def __iter__(self) -> Iterator[C]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self.values())

    def __contains__(self, item: object) -> bool:
        return item in self.values()

    def __repr__(self) -> str:
        state = "loaded" if self._loaded else "pending"
        return f"Classification({self.name!r}, {self.constant_type.__name__}, {state})"


def _default_source() -> PropertySource:
    from cpcommon.config.properties import get_property_manager

    return get_property_manager()
