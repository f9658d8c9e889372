"""Hash-based and ordered containers driven by explicit strategies.

Membership is decided by the container's EqualityStrategy, never by
object identity unless the strategy itself compares identities. A
strategy whose equals and hash disagree produces the classic lookup
bug: an equal-but-distinct probe lands in a different bucket and is
not found.
"""

import bisect
import logging
from collections.abc import Iterable, Iterator
from functools import cmp_to_key
from typing import Any

from .errors import InvalidArgumentError, OutOfRangeError
from .models import ContainerSlot
from .ports import EqualityStrategy, OrderingStrategy
from .strategies import StrategyRegistry, default_registry

logger = logging.getLogger(__name__)

_MISSING = object()


class _HashTable:
    """Bucket array shared by HashContainer and HashMapping.

    Entries are (hash, key, payload) triples. The hash is computed once
    on insert and reused on lookup short-circuit and on resize.

    With no explicit strategy, the registry resolves one from the first
    value inserted and the table keeps it from then on.
    """

    def __init__(
        self,
        strategy: EqualityStrategy | None = None,
        initial_capacity: int = 16,
        load_factor: float = 0.75,
        registry: StrategyRegistry | None = None,
    ):
        if initial_capacity <= 0:
            raise InvalidArgumentError(
                f"initial_capacity must be positive, got {initial_capacity}"
            )
        if not 0 < load_factor <= 1:
            raise InvalidArgumentError(
                f"load_factor must be in (0, 1], got {load_factor}"
            )
        self.strategy = strategy
        self.registry = registry if registry is not None else default_registry
        self.load_factor = load_factor
        self._slots: list[ContainerSlot] = [ContainerSlot(i) for i in range(initial_capacity)]
        self._size = 0

    @property
    def bucket_count(self) -> int:
        return len(self._slots)

    def slots(self) -> tuple[ContainerSlot, ...]:
        """Snapshot of the bucket array, for inspection in tests and reports."""
        return tuple(self._slots)

    def _slot_for(self, h: int) -> ContainerSlot:
        return self._slots[h % len(self._slots)]

    def _resolve(self, key: Any, pin: bool) -> EqualityStrategy:
        """Return the table's strategy, resolving it from key if unset.

        Raises:
            InvalidArgumentError: If the registry refuses key's type.
        """
        if self.strategy is not None:
            return self.strategy
        strategy = self.registry.strategy_for(key)
        if pin:
            self.strategy = strategy
            logger.debug(f"Resolved {strategy.name} strategy from {type(key).__name__}")
        return strategy

    def _find(self, key: Any, pin: bool = False) -> tuple[ContainerSlot, int, int]:
        """Return (slot, position, hash); position is -1 if key is absent."""
        strategy = self._resolve(key, pin)
        h = strategy.hash(key)
        slot = self._slot_for(h)
        for pos, (entry_hash, entry_key, _) in enumerate(slot.entries):
            if entry_hash == h and strategy.equals(entry_key, key):
                return slot, pos, h
        return slot, -1, h

    def _add(self, slot: ContainerSlot, h: int, key: Any, payload: Any) -> None:
        slot.entries.append((h, key, payload))
        self._size += 1
        if self._size > self.load_factor * len(self._slots):
            self._resize(len(self._slots) * 2)

    def _discard(self, slot: ContainerSlot, pos: int) -> tuple[int, Any, Any]:
        self._size -= 1
        return slot.entries.pop(pos)

    def _resize(self, new_count: int) -> None:
        old = self._slots
        self._slots = [ContainerSlot(i) for i in range(new_count)]
        for slot in old:
            for entry in slot.entries:
                self._slot_for(entry[0]).entries.append(entry)
        logger.debug(f"Resized hash table from {len(old)} to {new_count} buckets ({self._size} entries)")

    def _entries(self) -> Iterator[tuple[int, Any, Any]]:
        for slot in self._slots:
            yield from slot.entries

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    @property
    def strategy_name(self) -> str | None:
        return self.strategy.name if self.strategy is not None else None

    def clear(self) -> None:
        for slot in self._slots:
            slot.entries.clear()
        self._size = 0


class HashContainer(_HashTable):
    """A hash set whose membership follows an EqualityStrategy.

    Example:
        >>> box = HashContainer(KeyStrategy(lambda s: s.name))
        >>> box.insert(Student("Aden"))
        True
        >>> box.contains(Student("Aden"))
        True
    """

    def __init__(
        self,
        strategy: EqualityStrategy | None = None,
        initial_capacity: int = 16,
        load_factor: float = 0.75,
        values: Iterable[Any] = (),
        registry: StrategyRegistry | None = None,
    ):
        super().__init__(strategy, initial_capacity, load_factor, registry)
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add value unless an equal value is already stored.

        Returns:
            True if value was added, False if an equal value was present.
        """
        slot, pos, h = self._find(value, pin=True)
        if pos >= 0:
            return False
        self._add(slot, h, value, None)
        return True

    def contains(self, value: Any) -> bool:
        """True iff some stored element equals value under the strategy."""
        return self._find(value)[1] >= 0

    def remove(self, value: Any) -> bool:
        """Remove the stored element equal to value; False if none matched."""
        slot, pos, _ = self._find(value)
        if pos < 0:
            return False
        self._discard(slot, pos)
        return True

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        for _, value, _ in self._entries():
            yield value

    def __repr__(self) -> str:
        return f"HashContainer(strategy={self.strategy_name!r}, size={self._size})"


class HashMapping(_HashTable):
    """A hash map whose key lookup follows an EqualityStrategy."""

    def put(self, key: Any, value: Any) -> Any:
        """Associate value with key.

        Returns:
            The previous value for an equal key, or None. The originally
            stored key object is kept when an equal key is re-put.
        """
        slot, pos, h = self._find(key, pin=True)
        if pos >= 0:
            entry_hash, stored_key, previous = slot.entries[pos]
            slot.entries[pos] = (entry_hash, stored_key, value)
            return previous
        self._add(slot, h, key, value)
        return None

    def get(self, key: Any, default: Any = None) -> Any:
        slot, pos, _ = self._find(key)
        if pos < 0:
            return default
        return slot.entries[pos][2]

    def remove(self, key: Any, default: Any = _MISSING) -> Any:
        """Remove key and return its value.

        Raises:
            KeyError: If key is absent and no default was given.
        """
        slot, pos, _ = self._find(key)
        if pos < 0:
            if default is _MISSING:
                raise KeyError(key)
            return default
        return self._discard(slot, pos)[2]

    def contains_key(self, key: Any) -> bool:
        return self._find(key)[1] >= 0

    def keys(self) -> list[Any]:
        return [key for _, key, _ in self._entries()]

    def items(self) -> list[tuple[Any, Any]]:
        return [(key, value) for _, key, value in self._entries()]

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: Any) -> Any:
        slot, pos, _ = self._find(key)
        if pos < 0:
            raise KeyError(key)
        return slot.entries[pos][2]

    def __setitem__(self, key: Any, value: Any) -> None:
        self.put(key, value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"HashMapping(strategy={self.strategy_name!r}, size={self._size})"


class OrderedContainer:
    """A sorted set whose membership is compare(e, v) == 0.

    Equality is decided by the ordering alone, so an ordering that is
    inconsistent with equals will merge or split values unexpectedly.
    """

    def __init__(self, ordering: OrderingStrategy, values: Iterable[Any] = ()):
        if not isinstance(ordering, OrderingStrategy):
            raise InvalidArgumentError(
                f"ordering must be an OrderingStrategy, got {type(ordering).__name__}"
            )
        self.ordering = ordering
        self._key = cmp_to_key(ordering.compare)
        self._keys: list[Any] = []
        self._values: list[Any] = []
        for value in values:
            self.insert(value)

    def _locate(self, value: Any) -> tuple[int, bool]:
        k = self._key(value)
        pos = bisect.bisect_left(self._keys, k)
        found = pos < len(self._values) and self.ordering.compare(self._values[pos], value) == 0
        return pos, found

    def insert(self, value: Any) -> bool:
        pos, found = self._locate(value)
        if found:
            return False
        self._keys.insert(pos, self._key(value))
        self._values.insert(pos, value)
        return True

    def contains(self, value: Any) -> bool:
        return self._locate(value)[1]

    def remove(self, value: Any) -> bool:
        pos, found = self._locate(value)
        if not found:
            return False
        del self._keys[pos]
        del self._values[pos]
        return True

    def first(self) -> Any:
        if not self._values:
            raise OutOfRangeError(0, 0)
        return self._values[0]

    def last(self) -> Any:
        if not self._values:
            raise OutOfRangeError(-1, 0)
        return self._values[-1]

    def size(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._values))
