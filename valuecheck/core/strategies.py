"""Equality and ordering strategies, plus per-type strategy resolution.

A type opts into value semantics by providing both equals and hash.
Types that provide neither fall back to the registry's default
strategy, which compares by identity. A type that overrides equality
but cannot be hashed is refused outright.
"""

import logging
from collections.abc import Callable
from typing import Any

from .errors import InvalidArgumentError
from .ports import EqualityStrategy, OrderingStrategy

logger = logging.getLogger(__name__)


class IdentityStrategy(EqualityStrategy):
    """Reference comparison: two values are equal only if they are the same object."""

    name = "identity"

    def equals(self, a: Any, b: Any) -> bool:
        return a is b

    def hash(self, value: Any) -> int:
        return id(value)


class NaturalStrategy(EqualityStrategy):
    """Uses the value's own __eq__ and __hash__."""

    name = "natural"

    def equals(self, a: Any, b: Any) -> bool:
        if a is None or b is None:
            return a is b
        return bool(a == b)

    def hash(self, value: Any) -> int:
        return hash(value)


class KeyStrategy(EqualityStrategy):
    """Value semantics derived from a key function.

    Two values are equal when their keys are equal; the hash is the hash
    of the key. Consistent by construction as long as the key is hashable.
    """

    def __init__(self, key: Callable[[Any], Any], name: str | None = None):
        if not callable(key):
            raise InvalidArgumentError(f"key must be callable, got {type(key).__name__}")
        self.key = key
        self.name = name or f"key:{getattr(key, '__name__', 'key')}"

    def equals(self, a: Any, b: Any) -> bool:
        if a is None or b is None:
            return a is b
        return bool(self.key(a) == self.key(b))

    def hash(self, value: Any) -> int:
        return hash(self.key(value))


class PairedStrategy(EqualityStrategy):
    """An explicit equals/hash function pair.

    Both halves are required. Nothing checks that they agree; that is
    what ContractChecker is for. Passing equals-by-content together with
    hash=id reproduces the "only equals overridden" lookup bug.
    """

    def __init__(
        self,
        equals: Callable[[Any, Any], bool] | None,
        hash: Callable[[Any], int] | None,
        name: str = "paired",
    ):
        if equals is None or hash is None:
            missing = "equals" if equals is None else "hash"
            raise InvalidArgumentError(
                f"PairedStrategy requires both equals and hash; {missing} is missing"
            )
        if not callable(equals) or not callable(hash):
            raise InvalidArgumentError("equals and hash must both be callable")
        self._equals = equals
        self._hash = hash
        self.name = name

    def equals(self, a: Any, b: Any) -> bool:
        if a is None or b is None:
            return a is b
        return bool(self._equals(a, b))

    def hash(self, value: Any) -> int:
        return self._hash(value)


class NaturalOrdering(OrderingStrategy):
    """Orders values with their own < and > operators."""

    name = "natural"

    def compare(self, a: Any, b: Any) -> int:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0


class KeyOrdering(OrderingStrategy):
    """Orders values by a derived key."""

    def __init__(self, key: Callable[[Any], Any], name: str | None = None):
        if not callable(key):
            raise InvalidArgumentError(f"key must be callable, got {type(key).__name__}")
        self.key = key
        self.name = name or f"key:{getattr(key, '__name__', 'key')}"

    def compare(self, a: Any, b: Any) -> int:
        ka, kb = self.key(a), self.key(b)
        if ka < kb:
            return -1
        if ka > kb:
            return 1
        return 0


def opts_into_value_semantics(cls: type) -> bool:
    """Does cls (or a non-object base) define both __eq__ and a usable __hash__?"""
    return cls.__eq__ is not object.__eq__ and cls.__hash__ is not None


class StrategyRegistry:
    """Resolves the EqualityStrategy to use for a value's type.

    Resolution order:
    1. Explicit registration for the type or the nearest registered base
    2. NaturalStrategy if the type defines both __eq__ and __hash__
    3. InvalidArgumentError if the type overrides __eq__ but is unhashable
    4. The registry default (IdentityStrategy unless replaced)
    """

    def __init__(self, default: EqualityStrategy | None = None):
        self._default: EqualityStrategy = default or IdentityStrategy()
        self._natural = NaturalStrategy()
        self._registered: dict[type, EqualityStrategy] = {}

    @property
    def default(self) -> EqualityStrategy:
        return self._default

    @default.setter
    def default(self, strategy: EqualityStrategy) -> None:
        if not isinstance(strategy, EqualityStrategy):
            raise InvalidArgumentError(
                f"default must be an EqualityStrategy, got {type(strategy).__name__}"
            )
        logger.debug(f"Default strategy replaced: {self._default.name} -> {strategy.name}")
        self._default = strategy

    def register(self, cls: type, strategy: EqualityStrategy) -> None:
        """Register a strategy for cls and, unless overridden, its subclasses."""
        if not isinstance(cls, type):
            raise InvalidArgumentError(f"cls must be a type, got {cls!r}")
        if not isinstance(strategy, EqualityStrategy):
            raise InvalidArgumentError(
                f"strategy must be an EqualityStrategy, got {type(strategy).__name__}"
            )
        self._registered[cls] = strategy
        logger.debug(f"Registered {strategy.name} strategy for {cls.__name__}")

    def unregister(self, cls: type) -> None:
        self._registered.pop(cls, None)

    def strategy_for(self, value_or_type: Any) -> EqualityStrategy:
        """Return the strategy for a value or a type.

        Raises:
            InvalidArgumentError: If the type overrides equality but is
                unhashable and no explicit strategy is registered.
        """
        cls = value_or_type if isinstance(value_or_type, type) else type(value_or_type)

        for base in cls.__mro__:
            if base in self._registered:
                return self._registered[base]

        if opts_into_value_semantics(cls):
            return self._natural

        if cls.__eq__ is not object.__eq__ and cls.__hash__ is None:
            raise InvalidArgumentError(
                f"{cls.__name__} overrides __eq__ but is unhashable; "
                "register an explicit strategy or define __hash__"
            )

        return self._default


default_registry = StrategyRegistry()
